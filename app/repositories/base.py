"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from app.errors import StorageError
from app.repositories.db import get_db, write_lock
from settings import DB_PATH, WRITE_RETRIES


class BaseRepository:
    """Base repository with common functionality."""

    backend = "duckdb"

    def __init__(self, db_path: str | None = None):
        self._db_path = str(db_path or DB_PATH)
        get_db(self._db_path)
        logger.debug("{} initialized ({})", self.__class__.__name__, self._db_path)

    @property
    def _db(self) -> duckdb.DuckDBPyConnection:
        return get_db(self._db_path)

    def locked(self):
        """Context manager serializing writers."""
        return write_lock()

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        try:
            if params:
                return self._db.execute(query, params)
            return self._db.execute(query)
        except duckdb.Error as e:
            logger.error("Query failed: {}", e)
            raise StorageError("Database error") from e

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    @retry(
        stop=stop_after_attempt(WRITE_RETRIES),
        wait=wait_exponential(multiplier=0.05, max=1),
        retry=retry_if_exception_type(duckdb.TransactionException),
        reraise=True,
    )
    def _write(self, query: str, params: list | None) -> list:
        with self.locked():
            return self._db.execute(query, params or []).fetchall()

    def write(self, query: str, params: list | None = None) -> list:
        """Execute a single write statement, retrying on transaction conflicts."""
        try:
            return self._write(query, params)
        except duckdb.Error as e:
            logger.error("Write failed: {}", e)
            raise StorageError("Database write failed") from e
