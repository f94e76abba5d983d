from database.repositories.base import BaseRepository
from database.repositories.ball import BallRepository
from database.repositories.pattern import PatternRepository
from database.repositories.performance import PerformanceRepository
from database.repositories.bowler_specs import BowlerSpecsRepository

__all__ = [
    'BaseRepository',
    'BallRepository',
    'PatternRepository',
    'PerformanceRepository',
    'BowlerSpecsRepository',
]
