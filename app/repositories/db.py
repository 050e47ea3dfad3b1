"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()

# Serializes writers inside this process; DuckDB itself rejects
# conflicting concurrent updates instead of queueing them.
_write_lock = threading.RLock()
_connect_lock = threading.Lock()


def write_lock() -> threading.RLock:
    """Process-wide lock held around every write statement."""
    return _write_lock


def db_exists(path: str | None = None) -> bool:
    """Check if database file exists."""
    return Path(path or DB_PATH).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if main tables already exist."""
    try:
        result = conn.execute(
            "SELECT COUNT(*) FROM information_schema.tables WHERE table_name IN ('effect', 'submission')"
        ).fetchone()
        return result[0] == 2
    except duckdb.Error:
        return False


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def _ensure_db_exists(path: str) -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists(path):
        logger.warning("DB not found: {}. Creating empty DB.", path)
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        conn = duckdb.connect(path)
        init_tables(conn)
        conn.close()


def _connections() -> dict[str, duckdb.DuckDBPyConnection]:
    if not hasattr(_local, "conns"):
        _local.conns = {}
    return _local.conns


def get_db(path: str | None = None) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection for a database file."""
    path = str(path or DB_PATH)
    conns = _connections()
    if conns.get(path) is None:
        with _connect_lock:
            _ensure_db_exists(path)
            conn = duckdb.connect(path)
            init_tables(conn)
        conns[path] = conn
        logger.debug("DB connected: {}", path)
    return conns[path]


def close_db(path: str | None = None) -> None:
    """Close thread-local connection."""
    path = str(path or DB_PATH)
    conn = _connections().pop(path, None)
    if conn is not None:
        conn.close()
        logger.debug("DB connection closed")


def get_write_connection(path: str | None = None) -> duckdb.DuckDBPyConnection:
    """Get a dedicated writable connection (for ETL operations)."""
    path = str(path or DB_PATH)
    _ensure_db_exists(path)
    conn = duckdb.connect(path)
    init_tables(conn)
    return conn
