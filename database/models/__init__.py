from .base import Base
from .ball import BowlingBall
from .pattern import OilPattern
from .performance import PerformanceData
from .bowler_specs import BowlerSpecs

__all__ = [
    'Base',
    'BowlingBall',
    'OilPattern',
    'PerformanceData',
    'BowlerSpecs',
]
