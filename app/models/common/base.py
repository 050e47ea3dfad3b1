"""Base entity classes for all domain entities."""

from dataclasses import asdict, dataclass, fields
from datetime import date, datetime
from typing import Any

from pydantic.alias_generators import to_camel


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary (snake_case keys)."""
        return asdict(self)


@dataclass
class RecordEntity(BaseEntity):
    """Entity persisted as a camelCase record (JSON files, API payloads)."""

    def to_record(self) -> dict[str, Any]:
        """Serialize to camelCase keys, dates as ISO strings."""
        record = {}
        for key, value in self.to_dict().items():
            if isinstance(value, (date, datetime)):
                value = value.isoformat()
            record[to_camel(key)] = value
        return record

    @classmethod
    def from_record(cls, data: dict[str, Any]):
        """Build from a camelCase record, ignoring unknown keys."""
        kwargs = {}
        for f in fields(cls):
            key = to_camel(f.name)
            if key in data:
                kwargs[f.name] = data[key]
        return cls(**kwargs)
