"""ETL package - catalog import/export between JSON files and DuckDB."""

from etl.effects import export_effects, import_effects, load_json_effects
from etl.validation import validate_catalog

__all__ = [
    "import_effects",
    "export_effects",
    "load_json_effects",
    "validate_catalog",
]
