"""Effect domain models - catalog, submissions and derived entities."""

from app.models.effects.effect import EFFECT_COLUMNS, EFFECT_DDL
from app.models.effects.entities import (
    CategorySummary,
    Effect,
    SiteStats,
    Submission,
    VoteAggregate,
)
from app.models.effects.submission import SUBMISSION_COLUMNS, SUBMISSION_DDL

__all__ = [
    "EFFECT_DDL",
    "EFFECT_COLUMNS",
    "SUBMISSION_DDL",
    "SUBMISSION_COLUMNS",
    "Effect",
    "Submission",
    "VoteAggregate",
    "CategorySummary",
    "SiteStats",
]
