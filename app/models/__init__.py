"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.effects import (
    EFFECT_COLUMNS,
    EFFECT_DDL,
    SUBMISSION_COLUMNS,
    SUBMISSION_DDL,
    CategorySummary,
    Effect,
    SiteStats,
    Submission,
    VoteAggregate,
)

ALL_DDL = [
    EFFECT_DDL,
    SUBMISSION_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    # Effects
    "EFFECT_DDL",
    "EFFECT_COLUMNS",
    "SUBMISSION_DDL",
    "SUBMISSION_COLUMNS",
    "Effect",
    "Submission",
    "VoteAggregate",
    "CategorySummary",
    "SiteStats",
    # All DDL
    "ALL_DDL",
]
