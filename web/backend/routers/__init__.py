"""API route handlers."""

from .balls import router as balls_router
from .patterns import router as patterns_router
from .performance import router as performance_router
from .bowler_specs import router as bowler_specs_router
from .recommendations import router as recommendations_router
from .stats import router as stats_router
