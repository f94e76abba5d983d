import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import select

from database.models import BowlingBall
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

# Columns a caller may never overwrite through an update
_PROTECTED_FIELDS = frozenset({'id', 'user_id', 'created_at'})


class BallRepository(BaseRepository):
    def get_balls_for_user(self, user_id: str) -> List[BowlingBall]:
        stmt = (
            select(BowlingBall)
            .where(BowlingBall.user_id == user_id)
            .order_by(BowlingBall.created_at, BowlingBall.name)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_ball(self, ball_id: str, user_id: Optional[str] = None) -> Optional[BowlingBall]:
        stmt = select(BowlingBall).where(BowlingBall.id == ball_id)
        if user_id is not None:
            stmt = stmt.where(BowlingBall.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def create_ball(self, user_id: str, **fields: Any) -> BowlingBall:
        ball = BowlingBall(user_id=user_id, **fields)
        self.db.add(ball)
        self.db.flush()
        logger.info(f"Added ball {ball.id} ({ball.brand} {ball.name}) for user {user_id}")
        return ball

    def update_ball(self, ball: BowlingBall, updates: Dict[str, Any]) -> BowlingBall:
        for key, value in updates.items():
            if key in _PROTECTED_FIELDS or not hasattr(BowlingBall, key):
                continue
            setattr(ball, key, value)
        self.db.flush()
        return ball

    def delete_ball(self, ball: BowlingBall) -> None:
        self.db.delete(ball)
        self.db.flush()
        logger.info(f"Deleted ball {ball.id} for user {ball.user_id}")
