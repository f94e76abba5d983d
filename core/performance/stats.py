#!/usr/bin/env python3
"""
Dashboard Statistics - Aggregate a bowler's logged games.

Produces the numbers behind the dashboard: averages, a score trend,
per-ball usage and the most recent games. Rows may be ORM objects or
mappings; numeric columns stored as Decimal or str are converted with
safe float parsing, and a missing entry angle is left out of the average.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)

SCORE_TREND_GAMES = 12
RECENT_GAMES = 5
UNKNOWN_BALL = "Unknown Ball"
UNKNOWN_PATTERN = "Unknown Pattern"


@dataclass
class ScorePoint:
    game_date: Optional[datetime]
    score: int


@dataclass
class BallUsage:
    ball_id: str
    name: str
    games: int
    percentage: float


@dataclass
class RecentGame:
    game_date: Optional[datetime]
    venue: str
    pattern: str
    ball: str
    score: int
    carry_percentage: float


@dataclass
class DashboardStats:
    """Aggregated statistics for one bowler."""
    games_played: int = 0
    average_score: float = 0.0
    carry_percentage: float = 0.0
    entry_angle: float = 0.0
    score_trend: List[ScorePoint] = field(default_factory=list)
    ball_usage: List[BallUsage] = field(default_factory=list)
    recent_games: List[RecentGame] = field(default_factory=list)


def _get(row: Any, name: str, default: Any = None) -> Any:
    if isinstance(row, dict):
        return row.get(name, default)
    return getattr(row, name, default)


def optional_float(value: Any) -> Optional[float]:
    """Convert a Decimal, str or number to float; None and unparseable values give None."""
    if value is None:
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def _date_key(row: Any) -> datetime:
    return _get(row, 'game_date') or datetime.min


def _names_by_id(rows: Optional[Sequence[Any]]) -> Dict[str, str]:
    return {str(_get(r, 'id')): _get(r, 'name') for r in (rows or [])}


def build_dashboard_stats(
    games: Sequence[Any],
    balls: Optional[Sequence[Any]] = None,
    patterns: Optional[Sequence[Any]] = None
) -> DashboardStats:
    """
    Build dashboard statistics from logged games.

    Args:
        games: Performance rows (score, carry_percentage, entry_angle,
            game_date, ball_id, pattern_id, venue)
        balls: The bowler's balls, used to resolve ball names
        patterns: Oil patterns, used to resolve pattern names

    Returns:
        DashboardStats; all zeros and empty lists when there are no games
    """
    if not games:
        return DashboardStats()

    games_played = len(games)
    ball_names = _names_by_id(balls)
    pattern_names = _names_by_id(patterns)

    average_score = sum(int(_get(g, 'score', 0)) for g in games) / games_played
    carry_percentage = sum(optional_float(_get(g, 'carry_percentage')) or 0.0 for g in games) / games_played

    angles = [a for a in (optional_float(_get(g, 'entry_angle')) for g in games) if a is not None]
    entry_angle = sum(angles) / len(angles) if angles else 0.0

    by_date = sorted(games, key=_date_key)
    score_trend = [
        ScorePoint(game_date=_get(g, 'game_date'), score=int(_get(g, 'score', 0)))
        for g in by_date[-SCORE_TREND_GAMES:]
    ]

    usage: Dict[str, int] = {}
    for game in games:
        ball_id = str(_get(game, 'ball_id'))
        usage[ball_id] = usage.get(ball_id, 0) + 1

    ball_usage = [
        BallUsage(
            ball_id=ball_id,
            name=ball_names.get(ball_id) or UNKNOWN_BALL,
            games=count,
            percentage=count / games_played * 100
        )
        for ball_id, count in usage.items()
    ]

    recent_games = [
        RecentGame(
            game_date=_get(g, 'game_date'),
            venue=_get(g, 'venue', ''),
            pattern=pattern_names.get(str(_get(g, 'pattern_id'))) or UNKNOWN_PATTERN,
            ball=ball_names.get(str(_get(g, 'ball_id'))) or UNKNOWN_BALL,
            score=int(_get(g, 'score', 0)),
            carry_percentage=optional_float(_get(g, 'carry_percentage')) or 0.0
        )
        for g in sorted(games, key=_date_key, reverse=True)[:RECENT_GAMES]
    ]

    logger.debug(f"Built dashboard stats over {games_played} games")

    return DashboardStats(
        games_played=games_played,
        average_score=average_score,
        carry_percentage=carry_percentage,
        entry_angle=entry_angle,
        score_trend=score_trend,
        ball_usage=ball_usage,
        recent_games=recent_games
    )
