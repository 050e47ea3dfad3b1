"""Effect repositories."""

from app.repositories.effects.effect import EffectRepository
from app.repositories.effects.json_file import JsonEffectRepository
from app.repositories.effects.store import VARIANTS, EffectStore, check_variant

__all__ = [
    "EffectStore",
    "EffectRepository",
    "JsonEffectRepository",
    "VARIANTS",
    "check_variant",
]
