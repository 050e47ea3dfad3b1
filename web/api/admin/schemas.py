"""Admin API schemas."""

from typing import Literal

from pydantic import Field

from web.api.common import CamelModel, MessageResponse


class LoginRequest(CamelModel):
    password: str


class TokenResponse(CamelModel):
    """Bearer token for admin endpoints."""

    token: str
    expires: int


class ModerateRequest(CamelModel):
    submission_id: int = Field(strict=True)
    action: Literal["approve", "reject"]


class ModerateResponse(MessageResponse):
    """Moderation outcome; effect_id is set on approval."""

    effect_id: int | None = None
