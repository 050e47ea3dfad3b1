"""Submission repositories."""

from app.repositories.submissions.json_file import JsonSubmissionRepository
from app.repositories.submissions.store import SubmissionStore
from app.repositories.submissions.submission import SubmissionRepository

__all__ = [
    "SubmissionStore",
    "SubmissionRepository",
    "JsonSubmissionRepository",
]
