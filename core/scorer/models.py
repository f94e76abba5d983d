#!/usr/bin/env python3
"""
Scoring Models - Immutable scorer inputs and the score result.

Inputs are snapshots of persisted rows taken right before scoring. The
``from_record`` constructors are the parse-and-validate boundary: numeric
fields that arrive as strings or Decimals (oil volume in particular) are
converted to floats here, so the rules only ever compare numbers.
"""

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Union

FALLBACK_REASON = "A solid choice for this pattern and your style."

HOOK_POTENTIALS = ('low', 'medium', 'high')
COVERSTOCK_TYPES = ('plastic', 'urethane', 'reactive')
CORE_TYPES = ('symmetrical', 'asymmetrical')
PATTERN_DIFFICULTIES = ('easy', 'medium', 'hard')
PLAYING_STYLES = ('stroker', 'tweener', 'cranker', 'power_player')

Record = Union[Mapping[str, Any], Any]


class InvalidRecordError(ValueError):
    """Raised when a record field cannot be parsed into the expected type."""


def _field(record: Record, name: str, default: Any = None) -> Any:
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def parse_number(value: Any, field_name: str) -> float:
    """Parse an int, float, Decimal or numeric string into a finite float."""
    if isinstance(value, bool) or value is None:
        raise InvalidRecordError(f"{field_name} must be numeric, got {value!r}")
    try:
        if isinstance(value, (int, float)):
            result = float(value)
        else:
            result = float(Decimal(str(value).strip()))
    except (InvalidOperation, ValueError, OverflowError) as e:
        raise InvalidRecordError(f"{field_name} must be numeric, got {value!r}") from e
    if not math.isfinite(result):
        raise InvalidRecordError(f"{field_name} must be finite, got {value!r}")
    return result


def parse_whole_number(value: Any, field_name: str) -> int:
    """Parse a value that must hold a whole number, e.g. "42" or 42.0."""
    result = parse_number(value, field_name)
    if not result.is_integer():
        raise InvalidRecordError(f"{field_name} must be a whole number, got {value!r}")
    return int(result)


def _text(value: Any) -> str:
    return '' if value is None else str(value)


@dataclass(frozen=True)
class Ball:
    """Candidate ball being scored."""
    hook_potential: str
    coverstock_type: str
    core_type: str
    surface: str = ''

    @classmethod
    def from_record(cls, record: Record) -> 'Ball':
        return cls(
            hook_potential=_text(_field(record, 'hook_potential')),
            coverstock_type=_text(_field(record, 'coverstock_type')),
            core_type=_text(_field(record, 'core_type')),
            surface=_text(_field(record, 'surface')),
        )


@dataclass(frozen=True)
class OilPattern:
    """Lane conditioning attributes relevant to scoring."""
    length: int
    volume: float
    difficulty: str = ''

    @classmethod
    def from_record(cls, record: Record) -> 'OilPattern':
        return cls(
            length=parse_whole_number(_field(record, 'length'), 'length'),
            volume=parse_number(_field(record, 'volume'), 'volume'),
            difficulty=_text(_field(record, 'difficulty')),
        )


@dataclass(frozen=True)
class BowlerSpecs:
    """Bowler release characteristics."""
    speed: float
    rev_rate: float
    playing_style: str

    @classmethod
    def from_record(cls, record: Record) -> 'BowlerSpecs':
        return cls(
            speed=parse_number(_field(record, 'speed'), 'speed'),
            rev_rate=parse_number(_field(record, 'rev_rate'), 'rev_rate'),
            playing_style=_text(_field(record, 'playing_style')),
        )


@dataclass(frozen=True)
class ScoreResult:
    """Match score for one ball and the explanation behind it."""
    match_score: int
    reason: str
