"""Common models - base classes."""

from app.models.common.base import BaseEntity, RecordEntity

__all__ = [
    "BaseEntity",
    "RecordEntity",
]
