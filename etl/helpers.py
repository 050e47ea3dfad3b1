"""ETL helper functions."""

import duckdb


def get_existing_ids(conn: duckdb.DuckDBPyConnection, table: str) -> set[int]:
    """Get existing IDs from a table."""
    try:
        rows = conn.execute(f"SELECT id FROM {table}").fetchall()
        return {r[0] for r in rows}
    except duckdb.Error:
        return set()
