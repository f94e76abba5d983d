#!/usr/bin/env python3
"""
Scoring Service - Rule-based ball match scoring and arsenal ranking.

The scorer starts every ball at 100 and subtracts the deductions of each
rule in RULE_GROUPS that fires. The final score is clamped to [0, 100];
the upper clamp can be switched off for parity with legacy results that
only clamped at zero.

Ranking is a fold over the single-ball scorer: every candidate is scored
against the same pattern and bowler, then sorted by score (highest first)
with ties kept in input order.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar
import logging

from core.scorer.models import Ball, OilPattern, BowlerSpecs, ScoreResult, FALLBACK_REASON
from core.scorer.rules import RULE_GROUPS, RuleGroup

logger = logging.getLogger(__name__)

BASE_SCORE = 100
MIN_SCORE = 0
MAX_SCORE = 100

T = TypeVar('T')


@dataclass(frozen=True)
class RankedCandidate(Generic[T]):
    """A candidate (usually a persisted ball row) with its score."""
    candidate: T
    result: ScoreResult

    @property
    def match_score(self) -> int:
        return self.result.match_score

    @property
    def reason(self) -> str:
        return self.result.reason


def score_ball(
    ball: Ball,
    pattern: OilPattern,
    specs: BowlerSpecs,
    clamp_upper: bool = True,
    rule_groups: Sequence[RuleGroup] = RULE_GROUPS
) -> ScoreResult:
    """
    Score how well a ball suits an oil pattern and a bowler.

    Args:
        ball: Ball attributes
        pattern: Oil pattern attributes (volume already parsed to float)
        specs: Bowler speed, rev rate and playing style
        clamp_upper: Also cap the score at 100
        rule_groups: Rule table to evaluate, in order

    Returns:
        ScoreResult with the clamped score and the joined explanations
    """
    score = BASE_SCORE
    reasons = []

    for group in rule_groups:
        for rule in group.evaluate(ball, pattern, specs):
            score -= rule.deduction
            reasons.append(rule.message)

    match_score = max(MIN_SCORE, score)
    if clamp_upper:
        match_score = min(MAX_SCORE, match_score)

    reason = " ".join(reasons) if reasons else FALLBACK_REASON
    return ScoreResult(match_score=int(match_score), reason=reason)


def rank_balls(
    candidates: Sequence[T],
    pattern: OilPattern,
    specs: BowlerSpecs,
    to_ball: Optional[Callable[[T], Ball]] = None,
    clamp_upper: bool = True
) -> List[RankedCandidate[T]]:
    """
    Score every candidate and sort by match score, highest first.

    Candidates that are not Ball instances are converted with ``to_ball``
    (defaults to Ball.from_record). Equal scores keep their input order.
    """
    if to_ball is None:
        to_ball = _as_ball

    ranked = [
        RankedCandidate(
            candidate=candidate,
            result=score_ball(to_ball(candidate), pattern, specs, clamp_upper=clamp_upper)
        )
        for candidate in candidates
    ]
    ranked.sort(key=lambda r: r.match_score, reverse=True)
    return ranked


def _as_ball(candidate: Any) -> Ball:
    if isinstance(candidate, Ball):
        return candidate
    return Ball.from_record(candidate)


class MatchScorer:
    """Scorer bound to a clamping policy, for callers that hold config."""

    def __init__(self, clamp_upper_bound: bool = True):
        self.clamp_upper_bound = clamp_upper_bound

    def score(self, ball: Ball, pattern: OilPattern, specs: BowlerSpecs) -> ScoreResult:
        return score_ball(ball, pattern, specs, clamp_upper=self.clamp_upper_bound)

    def rank(
        self,
        candidates: Sequence[T],
        pattern: OilPattern,
        specs: BowlerSpecs,
        to_ball: Optional[Callable[[T], Ball]] = None
    ) -> List[RankedCandidate[T]]:
        ranked = rank_balls(
            candidates, pattern, specs,
            to_ball=to_ball,
            clamp_upper=self.clamp_upper_bound
        )
        if ranked:
            logger.debug(
                f"Ranked {len(ranked)} balls: top score {ranked[0].match_score}, "
                f"bottom score {ranked[-1].match_score}"
            )
        return ranked
