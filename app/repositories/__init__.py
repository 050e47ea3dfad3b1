"""Repositories package - data access layer for both storage backends."""

from app.repositories.base import BaseRepository
from app.repositories.common import JsonFile
from app.repositories.db import (
    close_db,
    get_db,
    get_write_connection,
    init_tables,
)
from app.repositories.effects import (
    EffectRepository,
    EffectStore,
    JsonEffectRepository,
)
from app.repositories.submissions import (
    JsonSubmissionRepository,
    SubmissionRepository,
    SubmissionStore,
)

__all__ = [
    # DB
    "get_db",
    "close_db",
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    "JsonFile",
    # Effects
    "EffectStore",
    "EffectRepository",
    "JsonEffectRepository",
    # Submissions
    "SubmissionStore",
    "SubmissionRepository",
    "JsonSubmissionRepository",
]
