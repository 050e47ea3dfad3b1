"""Effect repository - DuckDB backed catalog."""

import dataclasses

from loguru import logger

from app.errors import NotFoundError
from app.models.effects import EFFECT_COLUMNS, Effect
from app.repositories.base import BaseRepository
from app.repositories.effects.store import EffectStore, check_variant

VOTE_COLUMNS = {"A": "votes_a", "B": "votes_b"}

_COLUMNS = ", ".join(EFFECT_COLUMNS)
_SELECT = f"SELECT {_COLUMNS} FROM effect"


def _to_effect(row: tuple) -> Effect:
    return Effect(**dict(zip(EFFECT_COLUMNS, row)))


class EffectRepository(BaseRepository, EffectStore):
    """Repository for effect rows in DuckDB."""

    def get(self, effect_id: int) -> Effect | None:
        row = self.fetchone(f"{_SELECT} WHERE id = ?", [effect_id])
        return _to_effect(row) if row else None

    def list_effects(self, category: str | None = None) -> list[Effect]:
        if category:
            rows = self.fetchall(f"{_SELECT} WHERE category = ? ORDER BY id", [category])
        else:
            rows = self.fetchall(f"{_SELECT} ORDER BY id")
        logger.debug("list_effects(category={}): {} effects", category, len(rows))
        return [_to_effect(r) for r in rows]

    def increment_vote(self, effect_id: int, variant: str) -> Effect:
        column = VOTE_COLUMNS[check_variant(variant)]
        rows = self.write(
            f"UPDATE effect SET {column} = {column} + 1 WHERE id = ? RETURNING {_COLUMNS}",
            [effect_id],
        )
        if not rows:
            raise NotFoundError(f"Effect {effect_id} not found")
        logger.debug("Vote {} for effect {}", variant, effect_id)
        return _to_effect(rows[0])

    def create(self, effect: Effect) -> Effect:
        placeholders = ", ".join("?" for _ in EFFECT_COLUMNS)
        with self.locked():
            new_id = self.fetchone("SELECT COALESCE(MAX(id), 0) + 1 FROM effect")[0]
            created = dataclasses.replace(effect, id=new_id)
            values = [getattr(created, c) for c in EFFECT_COLUMNS]
            self.write(f"INSERT INTO effect ({_COLUMNS}) VALUES ({placeholders})", values)
        logger.info("Effect {} created", new_id)
        return created

    def delete(self, effect_id: int) -> bool:
        rows = self.write("DELETE FROM effect WHERE id = ? RETURNING id", [effect_id])
        if rows:
            logger.info("Effect {} deleted", effect_id)
        return bool(rows)
