"""Stats API views - thin layer over services."""

from fastapi import APIRouter, Query

from app.container import container

from .schemas import CategoryItem, RadarResponse, StatsResponse

router = APIRouter(tags=["stats"])


@router.get("/categories", response_model=list[CategoryItem])
def get_categories() -> list[CategoryItem]:
    """Categories in first-seen order with effect counts."""
    return [CategoryItem(**c.to_dict()) for c in container.stats.categories()]


@router.get("/stats", response_model=StatsResponse)
def get_stats() -> StatsResponse:
    """Site totals. Never fails: falls back to fixed numbers."""
    return StatsResponse(**container.stats.site_stats().to_dict())


@router.get("/stats/radar", response_model=RadarResponse)
def get_radar(
    width: float = Query(300, gt=0),
    height: float = Query(300, gt=0),
    padding: float = Query(20, ge=0),
    distortion: float = Query(0, ge=0),
    seed: float = 1,
) -> RadarResponse:
    data = container.stats.radar(width, height, padding, distortion, seed)
    return RadarResponse(**data)
