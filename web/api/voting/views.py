"""Voting API views - thin layer over services."""

from fastapi import APIRouter

from app.container import container

from .schemas import VoteRequest, VoteResponse

router = APIRouter(tags=["voting"])


@router.post("/vote", response_model=VoteResponse)
def post_vote(body: VoteRequest) -> VoteResponse:
    """Count one vote and return the updated percentages."""
    aggregate = container.voting.vote(body.effect_id, body.variant)

    return VoteResponse(
        success=True,
        effect_id=body.effect_id,
        votes_a=aggregate.votes_for,
        votes_b=aggregate.votes_against,
        percent_a=aggregate.percent_for,
        percent_b=aggregate.percent_against,
        total_votes=aggregate.total,
    )
