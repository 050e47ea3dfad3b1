"""JSON array file with locked read-modify-write."""

import json
import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger

from app.errors import StorageError

_locks: dict[str, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    key = str(path.resolve())
    with _locks_guard:
        if key not in _locks:
            _locks[key] = threading.RLock()
        return _locks[key]


class JsonFile:
    """A file holding one JSON array of records."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = _lock_for(self.path)

    def read(self) -> list[dict]:
        """Load all records. Missing file reads as empty."""
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to read {}: {}", self.path, e)
            raise StorageError(f"Failed to read {self.path.name}") from e

        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            logger.error("{} is not a JSON array of objects", self.path)
            raise StorageError(f"{self.path.name} must contain a JSON array of objects")
        return data

    def write(self, records: list[dict]) -> None:
        """Replace file contents atomically."""
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error("Failed to write {}: {}", self.path, e)
            raise StorageError(f"Failed to write {self.path.name}") from e

    @contextmanager
    def update(self) -> Iterator[list[dict]]:
        """Yield records under the file lock; written back unless the block raises."""
        with self._lock:
            records = self.read()
            yield records
            self.write(records)
