#!/usr/bin/env python3
"""
Deduction Rules - Ordered rule table for the ball match scorer.

Each rule group covers one attribute interaction. Groups are evaluated in
table order. Within a first-match group at most one rule fires; the
playing-style group checks every rule independently.

Rule bands (thresholds are inclusive where noted):
- Pattern length: >= 42 long, <= 36 short, 37-41 neutral
- Oil volume: > 25 heavy, < 20 light, 20-25 neutral
- Rev rate: > 400 high, < 300 low, 300-400 neutral
- Speed: > 18 high, < 16 low, 16-18 neutral
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from core.scorer.models import Ball, OilPattern, BowlerSpecs

Predicate = Callable[[Ball, OilPattern, BowlerSpecs], bool]

LONG_PATTERN_MIN_LENGTH = 42
SHORT_PATTERN_MAX_LENGTH = 36
HEAVY_OIL_MIN_VOLUME = 25.0
LIGHT_OIL_MAX_VOLUME = 20.0
HIGH_REV_MIN_RPM = 400
LOW_REV_MAX_RPM = 300
HIGH_SPEED_MIN_MPH = 18
LOW_SPEED_MAX_MPH = 16


@dataclass(frozen=True)
class Rule:
    """A single deduction: fires when ``predicate`` holds."""
    key: str
    predicate: Predicate
    deduction: int
    message: str

    def applies(self, ball: Ball, pattern: OilPattern, specs: BowlerSpecs) -> bool:
        return self.predicate(ball, pattern, specs)


@dataclass(frozen=True)
class RuleGroup:
    """Rules about one attribute interaction."""
    name: str
    rules: Tuple[Rule, ...]
    first_match: bool = True

    def evaluate(self, ball: Ball, pattern: OilPattern, specs: BowlerSpecs) -> List[Rule]:
        fired = []
        for rule in self.rules:
            if rule.applies(ball, pattern, specs):
                fired.append(rule)
                if self.first_match:
                    break
        return fired


def _long_pattern(pattern: OilPattern) -> bool:
    return pattern.length >= LONG_PATTERN_MIN_LENGTH


def _short_pattern(pattern: OilPattern) -> bool:
    return pattern.length <= SHORT_PATTERN_MAX_LENGTH


def _heavy_oil(pattern: OilPattern) -> bool:
    return pattern.volume > HEAVY_OIL_MIN_VOLUME


def _light_oil(pattern: OilPattern) -> bool:
    return pattern.volume < LIGHT_OIL_MAX_VOLUME


PATTERN_LENGTH_RULES = RuleGroup(
    name='pattern_length',
    rules=(
        Rule(
            key='long_pattern_low_hook',
            predicate=lambda b, p, s: _long_pattern(p) and b.hook_potential == 'low',
            deduction=30,
            message="Low hook on a long pattern is not ideal.",
        ),
        Rule(
            key='long_pattern_medium_hook',
            predicate=lambda b, p, s: _long_pattern(p) and b.hook_potential == 'medium',
            deduction=10,
            message="Medium hook is acceptable, but high hook is preferred on long patterns.",
        ),
        Rule(
            key='short_pattern_high_hook',
            predicate=lambda b, p, s: _short_pattern(p) and b.hook_potential == 'high',
            deduction=25,
            message="High hook on a short pattern can be unpredictable.",
        ),
        Rule(
            key='short_pattern_medium_hook',
            predicate=lambda b, p, s: _short_pattern(p) and b.hook_potential == 'medium',
            deduction=10,
            message="Medium hook is usable, but low hook is often better on short patterns.",
        ),
    ),
)

OIL_VOLUME_RULES = RuleGroup(
    name='oil_volume',
    rules=(
        Rule(
            key='heavy_oil_plastic',
            predicate=lambda b, p, s: _heavy_oil(p) and b.coverstock_type == 'plastic',
            deduction=50,
            message="Plastic balls are unsuitable for heavy oil.",
        ),
        Rule(
            key='heavy_oil_urethane',
            predicate=lambda b, p, s: _heavy_oil(p) and b.coverstock_type == 'urethane',
            deduction=20,
            message="Urethane may struggle on very heavy oil.",
        ),
        Rule(
            key='light_oil_dull_reactive',
            # "Dull" match is case-sensitive
            predicate=lambda b, p, s: (
                _light_oil(p) and b.coverstock_type == 'reactive' and 'Dull' in b.surface
            ),
            deduction=20,
            message="A dull reactive ball might read the lane too early on light oil.",
        ),
    ),
)

REV_RATE_RULES = RuleGroup(
    name='rev_rate',
    rules=(
        Rule(
            key='high_rev_asymmetrical',
            predicate=lambda b, p, s: s.rev_rate > HIGH_REV_MIN_RPM and b.core_type == 'asymmetrical',
            deduction=10,
            message="High-rev players might find asymmetrical cores too aggressive.",
        ),
        Rule(
            key='low_rev_symmetrical_low_hook',
            predicate=lambda b, p, s: (
                s.rev_rate < LOW_REV_MAX_RPM
                and b.core_type == 'symmetrical'
                and b.hook_potential == 'low'
            ),
            deduction=20,
            message="Low-rev players may need a stronger core to generate hook.",
        ),
    ),
)

SPEED_RULES = RuleGroup(
    name='speed',
    rules=(
        Rule(
            key='high_speed_low_hook',
            predicate=lambda b, p, s: s.speed > HIGH_SPEED_MIN_MPH and b.hook_potential == 'low',
            deduction=25,
            message="High-speed players need more hook potential.",
        ),
        Rule(
            key='low_speed_high_hook',
            predicate=lambda b, p, s: s.speed < LOW_SPEED_MAX_MPH and b.hook_potential == 'high',
            deduction=15,
            message="Low-speed players might find high hook balls over-reactive.",
        ),
    ),
)

PLAYING_STYLE_RULES = RuleGroup(
    name='playing_style',
    rules=(
        Rule(
            key='stroker_high_hook',
            predicate=lambda b, p, s: s.playing_style == 'stroker' and b.hook_potential == 'high',
            deduction=10,
            message="Strokers often prefer a more controlled reaction than high-hook balls provide.",
        ),
        Rule(
            key='cranker_low_hook',
            predicate=lambda b, p, s: s.playing_style == 'cranker' and b.hook_potential == 'low',
            deduction=20,
            message="Crankers usually need more hook potential than this ball offers.",
        ),
    ),
    first_match=False,
)

RULE_GROUPS: Tuple[RuleGroup, ...] = (
    PATTERN_LENGTH_RULES,
    OIL_VOLUME_RULES,
    REV_RATE_RULES,
    SPEED_RULES,
    PLAYING_STYLE_RULES,
)
