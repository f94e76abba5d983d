#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class BallDetail(BaseModel):
    """A ball in the arsenal."""
    id: str
    user_id: str
    name: str
    brand: str
    weight: int
    core_type: str
    coverstock_type: str
    surface: str
    drilling: str
    hook_potential: str
    games_played: int = 0
    average_score: Optional[float] = None
    created_at: Optional[str] = None


class BallResponse(BaseModel):
    """Response containing a single ball."""
    success: bool
    ball: BallDetail


class BallsResponse(BaseModel):
    """Response containing the user's arsenal."""
    success: bool
    count: int
    balls: List[BallDetail]


class DeleteResponse(BaseModel):
    """Response after deleting a resource."""
    success: bool
    id: str


class PatternDetail(BaseModel):
    """An oil pattern."""
    id: str
    name: str
    category: str
    length: int
    volume: float
    ratio: str
    difficulty: str
    description: Optional[str] = None
    is_custom: bool = False
    created_by: Optional[str] = None


class PatternResponse(BaseModel):
    """Response containing a single oil pattern."""
    success: bool
    pattern: PatternDetail


class PatternsResponse(BaseModel):
    """Response containing oil patterns."""
    success: bool
    count: int
    patterns: List[PatternDetail]


class PerformanceDetail(BaseModel):
    """A logged game."""
    id: str
    ball_id: str
    pattern_id: str
    venue: str
    score: int
    carry_percentage: float
    entry_angle: Optional[float] = None
    game_date: Optional[str] = None
    created_at: Optional[str] = None


class PerformanceResponse(BaseModel):
    """Response containing a single logged game."""
    success: bool
    game: PerformanceDetail


class PerformanceListResponse(BaseModel):
    """Response containing logged games, most recent first."""
    success: bool
    count: int
    games: List[PerformanceDetail]


class BowlerSpecsDetail(BaseModel):
    """Saved bowler specs."""
    speed: float
    rev_rate: float
    playing_style: str
    updated_at: Optional[str] = None


class BowlerSpecsResponse(BaseModel):
    """Response containing saved bowler specs (null when none are saved)."""
    success: bool
    specs: Optional[BowlerSpecsDetail] = None


class BallRecommendation(BallDetail):
    """A ball from the arsenal with its match score for the requested pattern."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "user_id": "user-1",
                "name": "Phaze II",
                "brand": "Storm",
                "weight": 15,
                "core_type": "symmetrical",
                "coverstock_type": "reactive",
                "surface": "2000 Abralon",
                "drilling": "Pin Up 4.5",
                "hook_potential": "high",
                "games_played": 12,
                "average_score": 201.5,
                "created_at": "2026-02-01T12:00:00",
                "match_score": 90,
                "reason": "Strokers often prefer a more controlled reaction than high-hook balls provide."
            }
        }
    )

    match_score: int = Field(ge=0, le=100)
    reason: str = Field(min_length=1)


class RecommendationResponse(BaseModel):
    """Ranked recommendation, best match first."""
    success: bool
    pattern_id: str
    count: int
    recommendations: List[BallRecommendation]


class ScorePointDetail(BaseModel):
    game_date: Optional[str] = None
    score: int


class BallUsageDetail(BaseModel):
    ball_id: str
    name: str
    games: int = Field(ge=0)
    percentage: float = Field(ge=0, le=100)


class RecentGameDetail(BaseModel):
    game_date: Optional[str] = None
    venue: str
    pattern: str
    ball: str
    score: int
    carry_percentage: float


class DashboardStatsDetail(BaseModel):
    """Aggregated statistics over the user's logged games."""
    games_played: int = Field(ge=0)
    average_score: float
    carry_percentage: float
    entry_angle: float
    score_trend: List[ScorePointDetail]
    ball_usage: List[BallUsageDetail]
    recent_games: List[RecentGameDetail]


class StatsResponse(BaseModel):
    """Response containing dashboard statistics."""
    success: bool
    stats: DashboardStatsDetail
