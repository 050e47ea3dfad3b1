"""Data validation functions."""

import duckdb


def validate_catalog(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate data integrity of the effect catalog."""
    issues = []
    stats = {}

    effect_count = conn.execute("SELECT COUNT(*) FROM effect").fetchone()[0]
    stats["effects"] = effect_count
    if effect_count == 0:
        issues.append("No effects found")

    votes = conn.execute("SELECT COALESCE(SUM(votes_a + votes_b), 0) FROM effect").fetchone()[0]
    stats["votes"] = int(votes)

    negative = conn.execute("SELECT COUNT(*) FROM effect WHERE votes_a < 0 OR votes_b < 0").fetchone()[0]
    if negative > 0:
        issues.append(f"{negative} effects have negative vote counts")

    same_variants = conn.execute("SELECT COUNT(*) FROM effect WHERE variant_a = variant_b").fetchone()[0]
    if same_variants > 0:
        issues.append(f"{same_variants} effects have identical variants")

    unlabeled = conn.execute(
        """
        SELECT COUNT(DISTINCT category) FROM effect
        WHERE category_name IS NULL OR category_name = ''
        """
    ).fetchone()[0]
    if unlabeled > 0:
        issues.append(f"{unlabeled} categories have no display name")

    stats["categories"] = conn.execute("SELECT COUNT(DISTINCT category) FROM effect").fetchone()[0]
    stats["pending"] = conn.execute("SELECT COUNT(*) FROM submission WHERE status = 'pending'").fetchone()[0]

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
