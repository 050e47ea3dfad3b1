"""Effect repository - legacy effects.json catalog."""

import dataclasses
from pathlib import Path

from loguru import logger

from app.errors import NotFoundError, StorageError
from app.models.effects import Effect
from app.repositories.common import JsonFile
from app.repositories.effects.store import EffectStore, check_variant
from settings import DATA_DIR, EFFECTS_FILE

VOTE_KEYS = {"A": "votesA", "B": "votesB"}


def _to_effect(record: dict) -> Effect:
    try:
        return Effect.from_record(record)
    except (TypeError, ValueError) as e:
        raise StorageError("Malformed effect record") from e


class JsonEffectRepository(EffectStore):
    """Effects stored as one JSON array on disk."""

    backend = "json"

    def __init__(self, data_dir: Path | str | None = None):
        self._file = JsonFile(Path(data_dir or DATA_DIR) / EFFECTS_FILE)
        logger.debug("{} initialized ({})", self.__class__.__name__, self._file.path)

    def get(self, effect_id: int) -> Effect | None:
        for record in self._file.read():
            if record.get("id") == effect_id:
                return _to_effect(record)
        return None

    def list_effects(self, category: str | None = None) -> list[Effect]:
        records = self._file.read()
        if category:
            records = [r for r in records if r.get("category") == category]
        effects = sorted((_to_effect(r) for r in records), key=lambda e: e.id)
        logger.debug("list_effects(category={}): {} effects", category, len(effects))
        return effects

    def increment_vote(self, effect_id: int, variant: str) -> Effect:
        key = VOTE_KEYS[check_variant(variant)]
        with self._file.update() as records:
            record = next((r for r in records if r.get("id") == effect_id), None)
            if record is None:
                raise NotFoundError(f"Effect {effect_id} not found")
            record[key] = int(record.get(key) or 0) + 1
            effect = _to_effect(record)
        logger.debug("Vote {} for effect {}", variant, effect_id)
        return effect

    def create(self, effect: Effect) -> Effect:
        with self._file.update() as records:
            new_id = max((int(r.get("id") or 0) for r in records), default=0) + 1
            created = dataclasses.replace(effect, id=new_id)
            records.append(created.to_record())
        logger.info("Effect {} created", new_id)
        return created

    def delete(self, effect_id: int) -> bool:
        with self._file.update() as records:
            kept = [r for r in records if r.get("id") != effect_id]
            removed = len(kept) != len(records)
            records[:] = kept
        if removed:
            logger.info("Effect {} deleted", effect_id)
        return removed
