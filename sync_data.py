#!/usr/bin/env python3
"""
Move the effect catalog between effects.json and DuckDB.

Usage:
    python sync_data.py                      # Import data/effects.json (new ids only)
    python sync_data.py import FILE         # Import a specific JSON file
    python sync_data.py import FILE --force # Overwrite effects with the same ids
    python sync_data.py export FILE         # Dump DuckDB effects to JSON
    python sync_data.py --validate          # Check data integrity
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.repositories.db import get_write_connection  # noqa: E402
from etl import export_effects, import_effects, validate_catalog  # noqa: E402
from settings import DATA_DIR, DB_PATH, EFFECTS_FILE  # noqa: E402
from settings.logging import setup_logging  # noqa: E402

logger = setup_logging(level="INFO", to_file=True)


def run_validation() -> bool:
    """Validate the catalog in the database."""
    conn = get_write_connection(DB_PATH)
    result = validate_catalog(conn)
    conn.close()

    print("\n" + "=" * 60)
    print("CATALOG VALIDATION REPORT")
    print("=" * 60)
    print(f"  Effects: {result['stats']['effects']:,}")
    print(f"  Votes: {result['stats']['votes']:,}")
    print(f"  Categories: {result['stats']['categories']}")
    print(f"  Pending submissions: {result['stats']['pending']}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    print("✅ All data valid!" if result["valid"] else "❌ Some issues found.")
    print("=" * 60 + "\n")
    return result["valid"]


def main():
    args = sys.argv[1:]

    if "--validate" in args or args == ["validate"]:
        sys.exit(0 if run_validation() else 1)

    force = "--force" in args or "-f" in args
    args = [a for a in args if a not in ("--force", "-f")]

    command = args[0] if args else "import"
    if command not in ("import", "export"):
        print(__doc__)
        sys.exit(1)

    path = Path(args[1]) if len(args) > 1 else DATA_DIR / EFFECTS_FILE
    conn = get_write_connection(DB_PATH)
    try:
        if command == "import":
            if not path.exists():
                logger.error("File not found: {}", path)
                sys.exit(1)
            logger.info("Importing {} into {}{}", path, DB_PATH, " [FORCE]" if force else "")
            import_effects(conn, path, force=force)
        else:
            export_effects(conn, path)
    finally:
        conn.close()

    if command == "import":
        logger.info("Running validation...")
        run_validation()


if __name__ == "__main__":
    main()
