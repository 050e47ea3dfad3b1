"""Effect API views - thin layer over services."""

from fastapi import APIRouter

from app.container import container
from app.models.effects import Effect
from helpers.flavor import system_log
from web.api.errors import parse_effect_id

from .schemas import EffectDetail, EffectItem, RandomEffectResponse

router = APIRouter(tags=["effects"])


def to_item(effect: Effect) -> EffectItem:
    return EffectItem(**effect.to_dict())


def to_detail(effect: Effect) -> EffectDetail:
    aggregate = effect.aggregate()
    return EffectDetail(
        **effect.to_dict(),
        percent_a=aggregate.percent_for,
        percent_b=aggregate.percent_against,
        total_votes=aggregate.total,
        system_log=system_log(effect.title),
    )


@router.get("/effects", response_model=list[EffectItem])
def list_effects(category: str | None = None) -> list[EffectItem]:
    """List effects, optionally one category."""
    return [to_item(e) for e in container.effects.list_effects(category)]


@router.get("/effects/most-controversial", response_model=EffectDetail)
def get_most_controversial() -> EffectDetail:
    """Effect closest to a 50/50 split."""
    return to_detail(container.effects.most_controversial())


@router.get("/effects/random", response_model=RandomEffectResponse)
def get_random_effect() -> RandomEffectResponse:
    return RandomEffectResponse(id=container.effects.random_effect_id())


@router.get("/effect/{effect_id}", response_model=EffectDetail)
def get_effect(effect_id: str) -> EffectDetail:
    """Single effect with percentages."""
    return to_detail(container.effects.get_effect(parse_effect_id(effect_id)))
