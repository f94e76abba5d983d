#!/usr/bin/env python3
"""
Performance endpoints - log games and list them.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db, get_current_user_id
from ..services.performance_service import PerformanceService
from ..models.requests import PerformanceCreate
from ..models.responses import PerformanceListResponse, PerformanceResponse

router = APIRouter(prefix="/api/performance", tags=["performance"])


@router.get("", response_model=PerformanceListResponse)
def list_games(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List the user's logged games, most recent first."""
    games = PerformanceService(db).list_games(user_id)
    return PerformanceListResponse(success=True, count=len(games), games=games)


@router.post("", response_model=PerformanceResponse)
def log_game(
    request: PerformanceCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Log a game bowled with one of the user's balls."""
    game = PerformanceService(db).log_game(user_id, request)
    return PerformanceResponse(success=True, game=game)
