"""Submission API schemas."""

from datetime import datetime

from web.api.common import CamelModel


class SubmitRequest(CamelModel):
    """New effect proposal. Emptiness is checked by the service."""

    category: str = ""
    title: str = ""
    question: str = ""
    variant_a: str = ""
    variant_b: str = ""
    current_state: str | None = None
    source_link: str | None = None
    email: str | None = None


class SubmitResponse(CamelModel):
    success: bool
    message: str
    submission_id: int


class SubmissionItem(CamelModel):
    """Pending submission."""

    id: int
    category: str
    category_emoji: str
    category_name: str
    title: str
    question: str
    variant_a: str
    variant_b: str
    current_state: str
    source_link: str
    submitter_email: str
    status: str
    date_submitted: datetime | None
