#!/usr/bin/env python3
"""
Pattern service - oil pattern reference data.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from database.models import OilPattern
from database.repositories import PatternRepository
from ..models.requests import PatternCreate
from ..models.responses import PatternDetail
from ..utils import safe_float, safe_str
from ..exceptions import PatternNotFoundException

logger = logging.getLogger(__name__)


def to_pattern_detail(pattern: OilPattern) -> PatternDetail:
    """Convert ORM model to PatternDetail response model."""
    return PatternDetail(
        id=str(pattern.id),
        name=safe_str(pattern.name),
        category=safe_str(pattern.category),
        length=pattern.length,
        volume=safe_float(pattern.volume),
        ratio=safe_str(pattern.ratio),
        difficulty=safe_str(pattern.difficulty),
        description=pattern.description,
        is_custom=bool(pattern.is_custom),
        created_by=pattern.created_by,
    )


class PatternService:
    """Service for browsing and adding oil patterns."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = PatternRepository(db)

    def list_patterns(self, category: Optional[str] = None) -> List[PatternDetail]:
        return [to_pattern_detail(p) for p in self.repo.get_patterns(category)]

    def get_pattern(self, pattern_id: str) -> PatternDetail:
        pattern = self.repo.get_pattern(pattern_id)
        if not pattern:
            raise PatternNotFoundException(f"Oil pattern {pattern_id} not found")
        return to_pattern_detail(pattern)

    def create_pattern(self, user_id: str, request: PatternCreate) -> PatternDetail:
        """Create a pattern; anything outside the published categories is custom."""
        fields = request.model_dump()
        fields['is_custom'] = fields['category'] == 'custom'
        fields['created_by'] = user_id
        pattern = self.repo.create_pattern(**fields)
        self.repo.commit()
        return to_pattern_detail(pattern)
