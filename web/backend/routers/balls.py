#!/usr/bin/env python3
"""
Arsenal endpoints - manage the user's bowling balls.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db, get_current_user_id
from ..services.arsenal_service import ArsenalService
from ..models.requests import BallCreate, BallUpdate
from ..models.responses import BallsResponse, BallResponse, DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/balls", tags=["arsenal"])


@router.get("", response_model=BallsResponse)
def list_balls(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List every ball in the user's arsenal."""
    balls = ArsenalService(db).list_balls(user_id)
    return BallsResponse(success=True, count=len(balls), balls=balls)


@router.post("", response_model=BallResponse)
def add_ball(
    request: BallCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Add a ball to the user's arsenal."""
    ball = ArsenalService(db).add_ball(user_id, request)
    return BallResponse(success=True, ball=ball)


@router.get("/{ball_id}", response_model=BallResponse)
def get_ball(
    ball_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get one ball from the user's arsenal."""
    return BallResponse(success=True, ball=ArsenalService(db).get_ball(user_id, ball_id))


@router.put("/{ball_id}", response_model=BallResponse)
def update_ball(
    ball_id: str,
    request: BallUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Update a ball.

    Only the fields present in the request body are changed.
    """
    ball = ArsenalService(db).update_ball(user_id, ball_id, request)
    return BallResponse(success=True, ball=ball)


@router.delete("/{ball_id}", response_model=DeleteResponse)
def delete_ball(
    ball_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Remove a ball from the user's arsenal."""
    ArsenalService(db).delete_ball(user_id, ball_id)
    return DeleteResponse(success=True, id=ball_id)
