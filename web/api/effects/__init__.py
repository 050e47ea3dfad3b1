"""Effects API."""

from web.api.effects.views import (
    get_effect,
    get_most_controversial,
    get_random_effect,
    list_effects,
    router,
)

__all__ = [
    "router",
    "list_effects",
    "get_effect",
    "get_most_controversial",
    "get_random_effect",
]
