"""Effect store interface - one contract for every storage backend."""

from abc import ABC, abstractmethod

from app.errors import ValidationError
from app.models.effects import Effect

VARIANTS = ("A", "B")


def check_variant(variant: str) -> str:
    """Return the variant or raise for anything but A/B."""
    if variant not in VARIANTS:
        raise ValidationError(f"Invalid variant: {variant!r}. Must be 'A' or 'B'")
    return variant


class EffectStore(ABC):
    """Read and mutate the effect catalog."""

    backend: str = ""

    @abstractmethod
    def get(self, effect_id: int) -> Effect | None:
        """Effect by id, None when absent."""

    @abstractmethod
    def list_effects(self, category: str | None = None) -> list[Effect]:
        """Effects ordered by id, optionally only one category."""

    def list_all(self) -> list[Effect]:
        """Every effect in the catalog."""
        return self.list_effects()

    @abstractmethod
    def increment_vote(self, effect_id: int, variant: str) -> Effect:
        """Add one vote to a variant and return the updated effect.

        The increment happens inside the store as a single step, so
        concurrent voters never overwrite each other. Raises NotFoundError
        for an unknown id.
        """

    @abstractmethod
    def create(self, effect: Effect) -> Effect:
        """Insert with the next free id (max + 1), ignoring ``effect.id``."""

    @abstractmethod
    def delete(self, effect_id: int) -> bool:
        """Remove an effect. False when it did not exist."""
