"""Voting service."""

from loguru import logger

from app.models.effects import VoteAggregate
from app.repositories.effects import EffectStore, check_variant


class VotingService:
    """Applies votes to the catalog."""

    def __init__(self, effects: EffectStore):
        self._effects = effects
        logger.debug("VotingService initialized")

    def vote(self, effect_id: int, variant: str) -> VoteAggregate:
        """Count one vote and return the updated aggregate."""
        check_variant(variant)
        effect = self._effects.increment_vote(effect_id, variant)
        logger.info("Vote {} on effect {} ({}/{})", variant, effect_id, effect.votes_a, effect.votes_b)
        return effect.aggregate()
