#!/usr/bin/env python3
"""
Performance service - logged games and dashboard statistics.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from core.performance import build_dashboard_stats
from database.models import PerformanceData
from database.repositories import BallRepository, PatternRepository, PerformanceRepository
from ..models.requests import PerformanceCreate
from ..models.responses import (
    PerformanceDetail,
    DashboardStatsDetail,
    ScorePointDetail,
    BallUsageDetail,
    RecentGameDetail
)
from ..utils import safe_float, optional_float, safe_datetime_iso
from ..exceptions import BallNotFoundException, PatternNotFoundException

logger = logging.getLogger(__name__)


def to_performance_detail(game: PerformanceData) -> PerformanceDetail:
    """Convert ORM model to PerformanceDetail response model."""
    return PerformanceDetail(
        id=str(game.id),
        ball_id=str(game.ball_id),
        pattern_id=str(game.pattern_id),
        venue=game.venue,
        score=game.score,
        carry_percentage=safe_float(game.carry_percentage),
        entry_angle=optional_float(game.entry_angle),
        game_date=safe_datetime_iso(game.game_date),
        created_at=safe_datetime_iso(game.created_at),
    )


class PerformanceService:
    """Service for logging games and summarising them."""

    def __init__(self, db: Session):
        self.db = db
        self.games = PerformanceRepository(db)
        self.balls = BallRepository(db)
        self.patterns = PatternRepository(db)

    def list_games(self, user_id: str) -> List[PerformanceDetail]:
        return [to_performance_detail(g) for g in self.games.get_games_for_user(user_id)]

    def log_game(self, user_id: str, request: PerformanceCreate) -> PerformanceDetail:
        """
        Log a game.

        Raises:
            BallNotFoundException: If the ball is not in the user's arsenal.
            PatternNotFoundException: If the pattern does not exist.
        """
        if not self.balls.get_ball(request.ball_id, user_id=user_id):
            raise BallNotFoundException(f"Ball {request.ball_id} not found")
        if not self.patterns.get_pattern(request.pattern_id):
            raise PatternNotFoundException(f"Oil pattern {request.pattern_id} not found")

        game = self.games.create_game(user_id, **request.model_dump())
        self.games.commit()
        return to_performance_detail(game)

    def get_dashboard_stats(self, user_id: str) -> DashboardStatsDetail:
        games = self.games.get_games_for_user(user_id)
        balls = self.balls.get_balls_for_user(user_id)
        patterns = self.patterns.get_patterns_by_ids(sorted({str(g.pattern_id) for g in games}))

        stats = build_dashboard_stats(games, balls, patterns)

        return DashboardStatsDetail(
            games_played=stats.games_played,
            average_score=stats.average_score,
            carry_percentage=stats.carry_percentage,
            entry_angle=stats.entry_angle,
            score_trend=[
                ScorePointDetail(game_date=safe_datetime_iso(p.game_date), score=p.score)
                for p in stats.score_trend
            ],
            ball_usage=[
                BallUsageDetail(
                    ball_id=u.ball_id,
                    name=u.name,
                    games=u.games,
                    percentage=u.percentage
                )
                for u in stats.ball_usage
            ],
            recent_games=[
                RecentGameDetail(
                    game_date=safe_datetime_iso(g.game_date),
                    venue=g.venue,
                    pattern=g.pattern,
                    ball=g.ball,
                    score=g.score,
                    carry_percentage=g.carry_percentage
                )
                for g in stats.recent_games
            ],
        )
