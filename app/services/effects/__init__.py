"""Effect catalog services."""

from app.services.effects.service import EffectService

__all__ = ["EffectService"]
