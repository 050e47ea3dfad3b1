"""Effects ETL - move the catalog between effects.json and DuckDB."""

from pathlib import Path

import duckdb
import polars as pl
from loguru import logger

from app.models.effects import EFFECT_COLUMNS, Effect
from app.repositories.common import JsonFile
from etl.helpers import get_existing_ids


def load_json_effects(path: Path) -> list[Effect]:
    """Parse effects.json, keeping the first record of any duplicated id."""
    effects: dict[int, Effect] = {}
    for record in JsonFile(path).read():
        effect = Effect.from_record(record)
        if effect.id in effects:
            logger.warning("Duplicate effect id {} in {}, skipping", effect.id, path)
            continue
        effects[effect.id] = effect
    return list(effects.values())


def import_effects(conn: duckdb.DuckDBPyConnection, path: Path, force: bool = False) -> int:
    """Insert effects from a JSON file. Existing ids are skipped unless force."""
    effects = load_json_effects(path)
    existing = get_existing_ids(conn, "effect")

    if force:
        new = effects
    else:
        new = [e for e in effects if e.id not in existing]

    if not new:
        logger.info("Effects: nothing to import from {}", path)
        return 0

    effects_df = pl.DataFrame(
        [{c: getattr(e, c) for c in EFFECT_COLUMNS} for e in new],
        schema={
            "id": pl.Int32,
            "category": pl.Utf8,
            "category_emoji": pl.Utf8,
            "category_name": pl.Utf8,
            "title": pl.Utf8,
            "question": pl.Utf8,
            "variant_a": pl.Utf8,
            "variant_b": pl.Utf8,
            "votes_a": pl.Int32,
            "votes_b": pl.Int32,
            "current_state": pl.Utf8,
            "source_link": pl.Utf8,
            "date_added": pl.Date,
        },
    )

    conn.execute("BEGIN TRANSACTION")
    try:
        conn.register("effects_df", effects_df)
        if force:
            conn.execute("DELETE FROM effect WHERE id IN (SELECT id FROM effects_df)")
        conn.execute(f"INSERT INTO effect ({', '.join(EFFECT_COLUMNS)}) SELECT * FROM effects_df")
        conn.unregister("effects_df")
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise

    logger.info("Effects: {} imported from {}", len(new), path)
    return len(new)


def export_effects(conn: duckdb.DuckDBPyConnection, path: Path) -> int:
    """Write every effect row to a JSON file."""
    rows = conn.execute(f"SELECT {', '.join(EFFECT_COLUMNS)} FROM effect ORDER BY id").fetchall()
    records = [Effect(**dict(zip(EFFECT_COLUMNS, r))).to_record() for r in rows]
    JsonFile(path).write(records)
    logger.info("Effects: {} exported to {}", len(records), path)
    return len(records)
