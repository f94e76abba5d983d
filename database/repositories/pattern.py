import logging
from typing import Any, List, Optional
from sqlalchemy import select

from database.models import OilPattern
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class PatternRepository(BaseRepository):
    def get_patterns(self, category: Optional[str] = None) -> List[OilPattern]:
        stmt = select(OilPattern)
        if category:
            stmt = stmt.where(OilPattern.category == category)
        stmt = stmt.order_by(OilPattern.name)
        return list(self.db.execute(stmt).scalars().all())

    def get_pattern(self, pattern_id: str) -> Optional[OilPattern]:
        stmt = select(OilPattern).where(OilPattern.id == pattern_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_patterns_by_ids(self, pattern_ids: List[str]) -> List[OilPattern]:
        if not pattern_ids:
            return []
        stmt = select(OilPattern).where(OilPattern.id.in_(pattern_ids))
        return list(self.db.execute(stmt).scalars().all())

    def create_pattern(self, **fields: Any) -> OilPattern:
        pattern = OilPattern(**fields)
        self.db.add(pattern)
        self.db.flush()
        logger.info(f"Created oil pattern {pattern.id} ({pattern.name}, {pattern.length}ft)")
        return pattern
