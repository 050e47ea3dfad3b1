"""Submission API views - thin layer over services."""

from fastapi import APIRouter

from app.container import container

from .schemas import SubmitRequest, SubmitResponse

router = APIRouter(tags=["submissions"])


@router.post("/submit", response_model=SubmitResponse, status_code=201)
def post_submit(body: SubmitRequest) -> SubmitResponse:
    """Queue an effect proposal for moderation."""
    submission = container.submissions.submit(
        category=body.category,
        title=body.title,
        question=body.question,
        variant_a=body.variant_a,
        variant_b=body.variant_b,
        current_state=body.current_state or "",
        source_link=body.source_link or "",
        email=body.email or "",
    )
    return SubmitResponse(
        success=True,
        message="Effect sent for moderation",
        submission_id=submission.id,
    )
