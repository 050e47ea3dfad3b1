"""Effect (catalog claim) model."""

EFFECT_DDL = """
CREATE TABLE IF NOT EXISTS effect (
    id INTEGER PRIMARY KEY,
    category VARCHAR NOT NULL,
    category_emoji VARCHAR,
    category_name VARCHAR,
    title VARCHAR NOT NULL,
    question VARCHAR,
    variant_a VARCHAR NOT NULL,
    variant_b VARCHAR NOT NULL,
    votes_a INTEGER NOT NULL DEFAULT 0,
    votes_b INTEGER NOT NULL DEFAULT 0,
    current_state VARCHAR,
    source_link VARCHAR,
    date_added DATE
)
"""

EFFECT_COLUMNS = [
    "id",
    "category",
    "category_emoji",
    "category_name",
    "title",
    "question",
    "variant_a",
    "variant_b",
    "votes_a",
    "votes_b",
    "current_state",
    "source_link",
    "date_added",
]
