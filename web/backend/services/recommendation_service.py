#!/usr/bin/env python3
"""
Recommendation service - rank a user's arsenal for an oil pattern.

Resolves the pattern, the bowler specs and the user's balls, converts the
stored rows through the scorer's parsing boundary (oil volume comes back
from the database as a Decimal), and ranks every ball with the match scorer.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from core.scorer import Ball, OilPattern, BowlerSpecs, InvalidRecordError, MatchScorer
from database.repositories import BallRepository, PatternRepository, BowlerSpecsRepository
from ..models.requests import BowlerSpecsInput
from ..models.responses import BallRecommendation
from ..exceptions import (
    PatternNotFoundException,
    NoBallsFoundException,
    BowlerSpecsNotFoundException,
    InvalidRecordException
)
from .arsenal_service import to_ball_detail

logger = logging.getLogger(__name__)


class RecommendationService:
    """Service for ball recommendations."""

    def __init__(self, db: Session, scorer: Optional[MatchScorer] = None):
        self.db = db
        self.scorer = scorer or MatchScorer()
        self.balls = BallRepository(db)
        self.patterns = PatternRepository(db)
        self.specs = BowlerSpecsRepository(db)

    def recommend(
        self,
        user_id: str,
        pattern_id: str,
        bowler_specs: Optional[BowlerSpecsInput] = None
    ) -> List[BallRecommendation]:
        """
        Rank the user's balls for a pattern, best match first.

        Args:
            user_id: The calling user.
            pattern_id: Oil pattern to score against.
            bowler_specs: Specs for this request; the saved specs are used
                when omitted.

        Returns:
            Every ball in the arsenal with match_score and reason. Balls with
            equal scores keep their arsenal order.

        Raises:
            PatternNotFoundException: If the pattern does not exist.
            BowlerSpecsNotFoundException: If no specs were given or saved.
            NoBallsFoundException: If the user has no balls.
            InvalidRecordException: If a stored row has unparseable numbers.
        """
        pattern_row = self.patterns.get_pattern(pattern_id)
        if not pattern_row:
            raise PatternNotFoundException(f"Oil pattern {pattern_id} not found")

        specs_record = bowler_specs if bowler_specs is not None else self.specs.get_specs(user_id)
        if specs_record is None:
            raise BowlerSpecsNotFoundException(
                "Bowler specs are required: send them with the request or save them first"
            )

        ball_rows = self.balls.get_balls_for_user(user_id)
        if not ball_rows:
            raise NoBallsFoundException("No bowling balls found for this user.")

        try:
            pattern = OilPattern.from_record(pattern_row)
            specs = BowlerSpecs.from_record(specs_record)
            ranked = self.scorer.rank(ball_rows, pattern, specs, to_ball=Ball.from_record)
        except InvalidRecordError as e:
            raise InvalidRecordException(f"Cannot score pattern {pattern_id}: {e}") from e

        logger.info(
            f"Recommended {len(ranked)} balls for user {user_id} on pattern {pattern_id} "
            f"(length={pattern.length}, volume={pattern.volume}); "
            f"best score {ranked[0].match_score}"
        )

        return [
            BallRecommendation(
                **to_ball_detail(r.candidate).model_dump(),
                match_score=r.match_score,
                reason=r.reason
            )
            for r in ranked
        ]
