"""Performance statistics over logged games."""

from core.performance.stats import (
    build_dashboard_stats,
    DashboardStats,
    ScorePoint,
    BallUsage,
    RecentGame,
)

__all__ = ['build_dashboard_stats', 'DashboardStats', 'ScorePoint', 'BallUsage', 'RecentGame']
