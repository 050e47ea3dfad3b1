"""Common repository helpers."""

from app.repositories.common.json_file import JsonFile

__all__ = ["JsonFile"]
