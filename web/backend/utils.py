#!/usr/bin/env python3
"""
Conversion helpers for turning ORM rows into response models.
"""

from typing import Optional, Any
from datetime import datetime

from core.performance.stats import optional_float


def safe_float(value: Optional[Any], default: float = 0.0) -> float:
    """
    Convert a Decimal, int, float or numeric string to float.

    Returns ``default`` for None or anything that does not parse.
    """
    result = optional_float(value)
    return default if result is None else result


def safe_str(value: Optional[Any], default: str = "") -> str:
    """Convert value to string, using ``default`` for None."""
    if value is None:
        return default
    return str(value)


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """ISO 8601 string for a datetime, or None."""
    if dt is None:
        return None
    return dt.isoformat()
