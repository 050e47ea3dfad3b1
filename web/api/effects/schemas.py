"""Effect API schemas."""

from datetime import date

from web.api.common import CamelModel


class EffectItem(CamelModel):
    """Effect record."""

    id: int
    category: str
    category_emoji: str
    category_name: str
    title: str
    question: str
    variant_a: str
    variant_b: str
    votes_a: int
    votes_b: int
    current_state: str
    source_link: str
    date_added: date | None


class EffectDetail(EffectItem):
    """Effect record with its vote aggregate."""

    percent_a: float
    percent_b: float
    total_votes: int
    system_log: str


class RandomEffectResponse(CamelModel):
    """Id of a random effect."""

    id: int
