"""Submission store interface - pending moderation queue."""

import time
from abc import ABC, abstractmethod

from app.models.effects import Submission


def next_submission_id(max_id: int) -> int:
    """Millisecond timestamp, bumped past the newest existing id."""
    return max(int(time.time() * 1000), max_id + 1)


class SubmissionStore(ABC):
    """Queue of user submissions awaiting moderation."""

    backend: str = ""

    @abstractmethod
    def add(self, submission: Submission) -> Submission:
        """Store a submission under a fresh id and return it."""

    @abstractmethod
    def get(self, submission_id: int) -> Submission | None:
        """Submission by id, None when absent."""

    @abstractmethod
    def list_pending(self) -> list[Submission]:
        """Pending submissions, oldest first."""

    @abstractmethod
    def remove(self, submission_id: int) -> bool:
        """Drop a submission. False when it did not exist."""
