"""Application settings."""

import os
from pathlib import Path

# Storage
STORAGE_BACKEND = os.getenv("MANDELA_STORAGE", "duckdb")
DB_PATH = os.getenv("MANDELA_DB_PATH", "mandela.duckdb")
DATA_DIR = Path(os.getenv("MANDELA_DATA_DIR", "data"))
EFFECTS_FILE = "effects.json"
SUBMISSIONS_FILE = "submissions.json"

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# API
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))

# Admin (disabled while ADMIN_PASSWORD is unset)
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
SESSION_SECRET = os.getenv("SESSION_SECRET")  # >= 32 chars, else a per-process random secret
SESSION_TTL = int(os.getenv("SESSION_TTL", "3600"))

# Stats shown when the catalog cannot be read
STATS_FALLBACK_EFFECTS = int(os.getenv("STATS_FALLBACK_EFFECTS", "15"))
STATS_FALLBACK_VOTES = int(os.getenv("STATS_FALLBACK_VOTES", "48000"))
STATS_FALLBACK_PARTICIPANTS = int(os.getenv("STATS_FALLBACK_PARTICIPANTS", "16000"))

# Writes
WRITE_RETRIES = 5
