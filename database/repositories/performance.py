import logging
from typing import Any, List
from sqlalchemy import select

from database.models import PerformanceData
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class PerformanceRepository(BaseRepository):
    def get_games_for_user(self, user_id: str) -> List[PerformanceData]:
        stmt = (
            select(PerformanceData)
            .where(PerformanceData.user_id == user_id)
            .order_by(PerformanceData.game_date.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def create_game(self, user_id: str, **fields: Any) -> PerformanceData:
        game = PerformanceData(user_id=user_id, **fields)
        self.db.add(game)
        self.db.flush()
        logger.info(f"Logged game {game.id} (score {game.score}) for user {user_id}")
        return game
