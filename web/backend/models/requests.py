#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field

HookPotential = Literal["low", "medium", "high"]
CoverstockType = Literal["plastic", "urethane", "reactive"]
CoreType = Literal["symmetrical", "asymmetrical"]
PlayingStyle = Literal["stroker", "tweener", "cranker", "power_player"]
Difficulty = Literal["easy", "medium", "hard"]


class BallCreate(BaseModel):
    """Request to add a ball to the arsenal."""
    name: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    weight: int = Field(..., ge=6, le=16, description="Weight in pounds")
    core_type: CoreType
    coverstock_type: CoverstockType
    surface: str = Field(..., description='Surface finish, e.g. "2000 Abralon"')
    drilling: str = Field(..., description='Layout, e.g. "Pin Up 4.5"')
    hook_potential: HookPotential
    games_played: int = Field(default=0, ge=0)
    average_score: Optional[float] = Field(None, ge=0, le=300)


class BallUpdate(BaseModel):
    """Partial update of a ball; omitted fields are left unchanged."""
    name: Optional[str] = Field(None, min_length=1)
    brand: Optional[str] = Field(None, min_length=1)
    weight: Optional[int] = Field(None, ge=6, le=16)
    core_type: Optional[CoreType] = None
    coverstock_type: Optional[CoverstockType] = None
    surface: Optional[str] = None
    drilling: Optional[str] = None
    hook_potential: Optional[HookPotential] = None
    games_played: Optional[int] = Field(None, ge=0)
    average_score: Optional[float] = Field(None, ge=0, le=300)


class PatternCreate(BaseModel):
    """Request to create an oil pattern."""
    name: str = Field(..., min_length=1)
    category: str = Field(default="custom", description="pba, wtba, kegel or custom")
    length: int = Field(..., ge=20, le=70, description="Pattern length in feet")
    # Accepts "25.5" as well as 25.5
    volume: Decimal = Field(..., gt=0, lt=1000, description="Oil volume in mL")
    ratio: str = Field(..., description='Ratio, e.g. "3.06:1"')
    difficulty: Difficulty
    description: Optional[str] = None


class PerformanceCreate(BaseModel):
    """Request to log a game."""
    ball_id: str
    pattern_id: str
    venue: str = Field(..., min_length=1)
    score: int = Field(..., ge=0, le=300)
    carry_percentage: float = Field(..., ge=0, le=100)
    entry_angle: Optional[float] = Field(None, ge=0, le=10, description="Entry angle in degrees")
    game_date: datetime


class BowlerSpecsInput(BaseModel):
    """Bowler release characteristics."""
    speed: float = Field(..., gt=0, le=40, description="Ball speed in mph")
    rev_rate: float = Field(..., ge=0, le=1000, description="Rev rate in rpm")
    playing_style: PlayingStyle


class RecommendationRequest(BaseModel):
    """Request a ranked ball recommendation for a pattern.

    When bowler_specs is omitted the caller's saved specs are used.
    """
    pattern_id: str = Field(..., min_length=1)
    bowler_specs: Optional[BowlerSpecsInput] = None
