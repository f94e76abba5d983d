#!/usr/bin/env python3
"""
Stats endpoints - dashboard statistics over logged games.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db, get_current_user_id
from ..services.performance_service import PerformanceService
from ..models.responses import StatsResponse

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
def get_stats(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Get dashboard statistics for the user.

    Returns averages over all logged games, the last 12 scores in date
    order, how often each ball is used and the 5 most recent games.
    """
    return StatsResponse(success=True, stats=PerformanceService(db).get_dashboard_stats(user_id))
