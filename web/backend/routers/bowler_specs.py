#!/usr/bin/env python3
"""
Bowler specs endpoints - saved speed, rev rate and playing style.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db, get_current_user_id
from ..services.bowler_specs_service import BowlerSpecsService
from ..models.requests import BowlerSpecsInput
from ..models.responses import BowlerSpecsResponse

router = APIRouter(prefix="/api/bowler-specs", tags=["bowler-specs"])


@router.get("", response_model=BowlerSpecsResponse)
def get_bowler_specs(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get the user's saved specs; ``specs`` is null when none are saved."""
    return BowlerSpecsResponse(success=True, specs=BowlerSpecsService(db).get_specs(user_id))


@router.post("", response_model=BowlerSpecsResponse)
def save_bowler_specs(
    request: BowlerSpecsInput,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create or replace the user's saved specs."""
    specs = BowlerSpecsService(db).save_specs(user_id, request)
    return BowlerSpecsResponse(success=True, specs=specs)
