"""Submission (effect awaiting moderation) model."""

SUBMISSION_DDL = """
CREATE TABLE IF NOT EXISTS submission (
    id BIGINT PRIMARY KEY,
    category VARCHAR NOT NULL,
    category_emoji VARCHAR,
    category_name VARCHAR,
    title VARCHAR NOT NULL,
    question VARCHAR,
    variant_a VARCHAR NOT NULL,
    variant_b VARCHAR NOT NULL,
    current_state VARCHAR,
    source_link VARCHAR,
    submitter_email VARCHAR,
    status VARCHAR NOT NULL DEFAULT 'pending',
    date_submitted TIMESTAMP
)
"""

SUBMISSION_COLUMNS = [
    "id",
    "category",
    "category_emoji",
    "category_name",
    "title",
    "question",
    "variant_a",
    "variant_b",
    "current_state",
    "source_link",
    "submitter_email",
    "status",
    "date_submitted",
]
