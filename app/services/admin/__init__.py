"""Admin services."""

from app.services.admin.auth import AdminAuth

__all__ = ["AdminAuth"]
