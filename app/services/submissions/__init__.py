"""Submission services."""

from app.services.submissions.service import (
    CATEGORIES,
    SubmissionService,
    category_info,
    validate_submission,
)

__all__ = ["SubmissionService", "CATEGORIES", "category_info", "validate_submission"]
