"""Stats services."""

from app.services.stats.service import StatsService, summarize_categories, summarize_site

__all__ = ["StatsService", "summarize_categories", "summarize_site"]
