"""Stats API."""

from web.api.stats.views import get_categories, get_radar, get_stats, router

__all__ = [
    "router",
    "get_categories",
    "get_stats",
    "get_radar",
]
