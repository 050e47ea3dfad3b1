"""Services package - service class exports."""

from app.services.admin import AdminAuth
from app.services.effects import EffectService
from app.services.stats import StatsService
from app.services.submissions import SubmissionService
from app.services.voting import VotingService

__all__ = [
    "AdminAuth",
    "EffectService",
    "StatsService",
    "SubmissionService",
    "VotingService",
]
