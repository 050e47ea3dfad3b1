"""Stats service - category and site-wide summaries."""

from collections import defaultdict

from loguru import logger

from app.errors import StorageError
from app.models.effects import CategorySummary, Effect, SiteStats
from app.repositories.effects import EffectStore
from helpers import formulas
from settings import (
    STATS_FALLBACK_EFFECTS,
    STATS_FALLBACK_PARTICIPANTS,
    STATS_FALLBACK_VOTES,
)

FALLBACK_STATS = SiteStats(
    total_effects=STATS_FALLBACK_EFFECTS,
    total_votes=STATS_FALLBACK_VOTES,
    estimated_participants=STATS_FALLBACK_PARTICIPANTS,
)


def summarize_categories(effects: list[Effect]) -> list[CategorySummary]:
    """One summary per category in first-seen order."""
    by_category: dict[str, CategorySummary] = {}
    for effect in effects:
        summary = by_category.get(effect.category)
        if summary is None:
            summary = by_category[effect.category] = CategorySummary(
                category=effect.category,
                emoji=effect.category_emoji,
                name=effect.category_name,
                count=0,
            )
        summary.count += 1
    return list(by_category.values())


def summarize_site(effects: list[Effect]) -> SiteStats:
    total_votes = sum(e.total_votes for e in effects)
    return SiteStats(
        total_effects=len(effects),
        total_votes=total_votes,
        estimated_participants=formulas.estimated_participants(total_votes),
    )


class StatsService:
    """Derived statistics over the whole catalog."""

    def __init__(self, effects: EffectStore, fallback: SiteStats = FALLBACK_STATS):
        self._effects = effects
        self._fallback = fallback
        logger.debug("StatsService initialized")

    def categories(self) -> list[CategorySummary]:
        return summarize_categories(self._effects.list_all())

    def site_stats(self) -> SiteStats:
        """Site totals; the configured fallback when the catalog can't be read."""
        try:
            effects = self._effects.list_all()
        except StorageError as e:
            logger.warning("Stats unavailable, serving fallback: {}", e)
            return self._fallback
        return summarize_site(effects)

    def category_shares(self) -> list[tuple[str, float]]:
        """Percent of variant A votes per category, first-seen order."""
        votes: dict[str, list[int]] = defaultdict(lambda: [0, 0])
        for effect in self._effects.list_all():
            votes[effect.category][0] += effect.votes_a
            votes[effect.category][1] += effect.votes_b
        return [(c, formulas.vote_percentages(a, b)[0]) for c, (a, b) in votes.items()]

    def radar(
        self,
        width: float,
        height: float,
        padding: float,
        distortion: float = 0,
        seed: float = 1,
    ) -> dict:
        """Radar chart path over category shares."""
        shares = self.category_shares()
        values = [share for _, share in shares]
        return {
            "categories": [c for c, _ in shares],
            "values": values,
            "path": formulas.radar_path(values, width, height, padding, distortion, seed),
        }
