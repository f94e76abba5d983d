#!/usr/bin/env python3
"""
Scoring Module - Rule-based ball recommendation scoring.

Public API:
- score_ball: Score one ball for a pattern and bowler
- rank_balls: Score and sort an arsenal
- MatchScorer: Scorer bound to a clamping policy
- Ball, OilPattern, BowlerSpecs, ScoreResult: Scorer inputs and output

Modules:
- models.py: Immutable inputs, the result, and the record parsing boundary
- rules.py: Ordered deduction rule table
- service.py: Scoring and ranking
"""

from core.scorer.models import (
    Ball,
    OilPattern,
    BowlerSpecs,
    ScoreResult,
    InvalidRecordError,
    FALLBACK_REASON,
)
from core.scorer.service import score_ball, rank_balls, MatchScorer, RankedCandidate

__all__ = [
    'Ball',
    'OilPattern',
    'BowlerSpecs',
    'ScoreResult',
    'InvalidRecordError',
    'FALLBACK_REASON',
    'score_ball',
    'rank_balls',
    'MatchScorer',
    'RankedCandidate',
]
