import logging
from typing import Any, Optional
from sqlalchemy import select

from database.models import BowlerSpecs
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class BowlerSpecsRepository(BaseRepository):
    def get_specs(self, user_id: str) -> Optional[BowlerSpecs]:
        stmt = select(BowlerSpecs).where(BowlerSpecs.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def save_specs(self, user_id: str, speed: Any, rev_rate: Any, playing_style: str) -> BowlerSpecs:
        """Update the user's specs in place, or insert them if none exist."""
        specs = self.get_specs(user_id)
        if specs is None:
            specs = BowlerSpecs(user_id=user_id)
            self.db.add(specs)
            logger.info(f"Creating bowler specs for user {user_id}")

        specs.speed = speed
        specs.rev_rate = rev_rate
        specs.playing_style = playing_style
        self.db.flush()
        return specs
