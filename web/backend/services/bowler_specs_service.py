#!/usr/bin/env python3
"""
Bowler specs service - a user's saved release characteristics.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from database.models import BowlerSpecs
from database.repositories import BowlerSpecsRepository
from ..models.requests import BowlerSpecsInput
from ..models.responses import BowlerSpecsDetail
from ..utils import safe_float, safe_str, safe_datetime_iso

logger = logging.getLogger(__name__)


def to_specs_detail(specs: BowlerSpecs) -> BowlerSpecsDetail:
    """Convert ORM model to BowlerSpecsDetail response model."""
    return BowlerSpecsDetail(
        speed=safe_float(specs.speed),
        rev_rate=safe_float(specs.rev_rate),
        playing_style=safe_str(specs.playing_style),
        updated_at=safe_datetime_iso(specs.updated_at),
    )


class BowlerSpecsService:
    """Service for reading and saving bowler specs."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BowlerSpecsRepository(db)

    def get_specs(self, user_id: str) -> Optional[BowlerSpecsDetail]:
        specs = self.repo.get_specs(user_id)
        return to_specs_detail(specs) if specs else None

    def save_specs(self, user_id: str, request: BowlerSpecsInput) -> BowlerSpecsDetail:
        specs = self.repo.save_specs(
            user_id,
            speed=request.speed,
            rev_rate=int(round(request.rev_rate)),
            playing_style=request.playing_style
        )
        self.repo.commit()
        self.db.refresh(specs)
        return to_specs_detail(specs)
