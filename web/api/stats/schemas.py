"""Stats API schemas."""

from web.api.common import CamelModel


class CategoryItem(CamelModel):
    """Category with its effect count."""

    category: str
    emoji: str
    name: str
    count: int


class StatsResponse(CamelModel):
    """Site-wide totals."""

    total_effects: int
    total_votes: int
    estimated_participants: int


class RadarResponse(CamelModel):
    """Radar chart over variant A share per category."""

    categories: list[str]
    values: list[float]
    path: str
