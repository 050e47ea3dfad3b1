"""Submission repository - submissions.json moderation queue."""

import dataclasses
from pathlib import Path

from loguru import logger

from app.errors import StorageError
from app.models.effects import Submission
from app.repositories.common import JsonFile
from app.repositories.submissions.store import SubmissionStore, next_submission_id
from settings import DATA_DIR, SUBMISSIONS_FILE


def _to_submission(record: dict) -> Submission:
    try:
        return Submission.from_record(record)
    except (TypeError, ValueError) as e:
        raise StorageError("Malformed submission record") from e


class JsonSubmissionRepository(SubmissionStore):
    """Submissions stored as one JSON array on disk."""

    backend = "json"

    def __init__(self, data_dir: Path | str | None = None):
        self._file = JsonFile(Path(data_dir or DATA_DIR) / SUBMISSIONS_FILE)
        logger.debug("{} initialized ({})", self.__class__.__name__, self._file.path)

    def add(self, submission: Submission) -> Submission:
        with self._file.update() as records:
            max_id = max((int(r.get("id") or 0) for r in records), default=0)
            stored = dataclasses.replace(submission, id=next_submission_id(max_id))
            records.append(stored.to_record())
        logger.info("Submission {} queued", stored.id)
        return stored

    def get(self, submission_id: int) -> Submission | None:
        for record in self._file.read():
            if record.get("id") == submission_id:
                return _to_submission(record)
        return None

    def list_pending(self) -> list[Submission]:
        records = [r for r in self._file.read() if r.get("status", "pending") == "pending"]
        return sorted((_to_submission(r) for r in records), key=lambda s: s.id)

    def remove(self, submission_id: int) -> bool:
        with self._file.update() as records:
            kept = [r for r in records if r.get("id") != submission_id]
            removed = len(kept) != len(records)
            records[:] = kept
        return removed
