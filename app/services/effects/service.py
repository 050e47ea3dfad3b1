"""Effect catalog service."""

import random

from loguru import logger

from app.errors import NotFoundError
from app.models.effects import Effect
from app.repositories.effects import EffectStore
from helpers import formulas


class EffectService:
    """Catalog lookups."""

    def __init__(self, effects: EffectStore):
        self._effects = effects
        logger.debug("EffectService initialized ({})", effects.backend)

    def get_effect(self, effect_id: int) -> Effect:
        """Effect by id or NotFoundError."""
        effect = self._effects.get(effect_id)
        if effect is None:
            raise NotFoundError(f"Effect {effect_id} not found")
        return effect

    def list_effects(self, category: str | None = None) -> list[Effect]:
        return self._effects.list_effects(category)

    def delete_effect(self, effect_id: int) -> bool:
        return self._effects.delete(effect_id)

    def most_controversial(self) -> Effect:
        """Effect whose vote split is closest to 50/50 (ignores effects without votes)."""
        best, best_diff = None, None
        for effect in self._effects.list_all():
            diff = formulas.controversy(effect.votes_a, effect.votes_b)
            if diff is None:
                continue
            if best_diff is None or diff < best_diff:
                best, best_diff = effect, diff

        if best is None:
            raise NotFoundError("No controversial effect found")
        return best

    def random_effect_id(self) -> int:
        effects = self._effects.list_all()
        if not effects:
            raise NotFoundError("Catalog is empty")
        return random.choice(effects).id
