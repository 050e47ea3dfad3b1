"""Voting API schemas."""

from typing import Literal

from pydantic import Field

from web.api.common import CamelModel


class VoteRequest(CamelModel):
    """Vote for one variant of an effect."""

    effect_id: int = Field(strict=True)
    variant: Literal["A", "B"]


class VoteResponse(CamelModel):
    """Aggregate after the vote."""

    success: bool
    effect_id: int
    votes_a: int
    votes_b: int
    percent_a: float
    percent_b: float
    total_votes: int
