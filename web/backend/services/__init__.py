"""Business logic services."""

from .arsenal_service import ArsenalService
from .pattern_service import PatternService
from .performance_service import PerformanceService
from .bowler_specs_service import BowlerSpecsService
from .recommendation_service import RecommendationService
