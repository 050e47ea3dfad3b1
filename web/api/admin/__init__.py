"""Admin API."""

from web.api.admin.views import (
    delete_effect,
    list_all_effects,
    list_pending,
    login,
    moderate,
    router,
)

__all__ = [
    "router",
    "login",
    "list_all_effects",
    "delete_effect",
    "list_pending",
    "moderate",
]
