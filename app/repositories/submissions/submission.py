"""Submission repository - DuckDB backed moderation queue."""

import dataclasses

from loguru import logger

from app.models.effects import SUBMISSION_COLUMNS, Submission
from app.repositories.base import BaseRepository
from app.repositories.submissions.store import SubmissionStore, next_submission_id

_COLUMNS = ", ".join(SUBMISSION_COLUMNS)
_SELECT = f"SELECT {_COLUMNS} FROM submission"


def _to_submission(row: tuple) -> Submission:
    return Submission(**dict(zip(SUBMISSION_COLUMNS, row)))


class SubmissionRepository(BaseRepository, SubmissionStore):
    """Repository for pending submissions in DuckDB."""

    def add(self, submission: Submission) -> Submission:
        placeholders = ", ".join("?" for _ in SUBMISSION_COLUMNS)
        with self.locked():
            max_id = self.fetchone("SELECT COALESCE(MAX(id), 0) FROM submission")[0]
            stored = dataclasses.replace(submission, id=next_submission_id(max_id))
            values = [getattr(stored, c) for c in SUBMISSION_COLUMNS]
            self.write(f"INSERT INTO submission ({_COLUMNS}) VALUES ({placeholders})", values)
        logger.info("Submission {} queued", stored.id)
        return stored

    def get(self, submission_id: int) -> Submission | None:
        row = self.fetchone(f"{_SELECT} WHERE id = ?", [submission_id])
        return _to_submission(row) if row else None

    def list_pending(self) -> list[Submission]:
        rows = self.fetchall(f"{_SELECT} WHERE status = 'pending' ORDER BY id")
        return [_to_submission(r) for r in rows]

    def remove(self, submission_id: int) -> bool:
        rows = self.write("DELETE FROM submission WHERE id = ? RETURNING id", [submission_id])
        return bool(rows)
