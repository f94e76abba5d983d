#!/usr/bin/env python3
"""
Arsenal service - business logic for a user's bowling balls.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from database.models import BowlingBall
from database.repositories import BallRepository
from ..models.requests import BallCreate, BallUpdate
from ..models.responses import BallDetail
from ..utils import optional_float, safe_str, safe_datetime_iso
from ..exceptions import BallNotFoundException

logger = logging.getLogger(__name__)


def to_ball_detail(ball: BowlingBall) -> BallDetail:
    """Convert ORM model to BallDetail response model."""
    return BallDetail(
        id=str(ball.id),
        user_id=safe_str(ball.user_id),
        name=safe_str(ball.name),
        brand=safe_str(ball.brand),
        weight=ball.weight,
        core_type=safe_str(ball.core_type),
        coverstock_type=safe_str(ball.coverstock_type),
        surface=safe_str(ball.surface),
        drilling=safe_str(ball.drilling),
        hook_potential=safe_str(ball.hook_potential),
        games_played=ball.games_played or 0,
        average_score=optional_float(ball.average_score),
        created_at=safe_datetime_iso(ball.created_at),
    )


class ArsenalService:
    """Service for managing a user's arsenal."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BallRepository(db)

    def list_balls(self, user_id: str) -> List[BallDetail]:
        return [to_ball_detail(b) for b in self.repo.get_balls_for_user(user_id)]

    def get_ball(self, user_id: str, ball_id: str) -> BallDetail:
        return to_ball_detail(self._get_owned_ball(user_id, ball_id))

    def add_ball(self, user_id: str, request: BallCreate) -> BallDetail:
        ball = self.repo.create_ball(user_id, **request.model_dump())
        self.repo.commit()
        return to_ball_detail(ball)

    def update_ball(self, user_id: str, ball_id: str, request: BallUpdate) -> BallDetail:
        """
        Apply a partial update to one of the user's balls.

        Raises:
            BallNotFoundException: If the ball does not exist or belongs to
                another user.
        """
        ball = self._get_owned_ball(user_id, ball_id)
        updates = request.model_dump(exclude_unset=True)
        self.repo.update_ball(ball, updates)
        self.repo.commit()
        logger.info(f"Updated ball {ball_id} fields: {sorted(updates)}")
        return to_ball_detail(ball)

    def delete_ball(self, user_id: str, ball_id: str) -> None:
        ball = self._get_owned_ball(user_id, ball_id)
        self.repo.delete_ball(ball)
        self.repo.commit()

    def _get_owned_ball(self, user_id: str, ball_id: str) -> BowlingBall:
        ball = self.repo.get_ball(ball_id, user_id=user_id)
        if not ball:
            raise BallNotFoundException(f"Ball {ball_id} not found")
        return ball
