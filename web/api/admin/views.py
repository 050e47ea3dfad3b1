"""Admin API views - bearer-token protected catalog management."""

from fastapi import APIRouter, Depends, Header

from app.container import container
from web.api.common import MessageResponse
from web.api.effects.schemas import EffectItem
from web.api.effects.views import to_item
from web.api.errors import NotFoundError, parse_effect_id
from web.api.submissions.schemas import SubmissionItem

from .schemas import LoginRequest, ModerateRequest, ModerateResponse, TokenResponse

router = APIRouter(prefix="/admin", tags=["admin"])


def bearer_token(authorization: str | None) -> str | None:
    """Token from an 'Authorization: Bearer <token>' header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    return token.strip() if scheme.lower() == "bearer" else None


def require_admin(authorization: str | None = Header(default=None)) -> dict:
    return container.admin.verify(bearer_token(authorization))


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest) -> TokenResponse:
    return TokenResponse(**container.admin.login(body.password))


@router.get("/effects", response_model=list[EffectItem], dependencies=[Depends(require_admin)])
def list_all_effects() -> list[EffectItem]:
    return [to_item(e) for e in container.effects.list_effects()]


@router.delete("/effects/{effect_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
def delete_effect(effect_id: str) -> MessageResponse:
    effect_id = parse_effect_id(effect_id)
    if not container.effects.delete_effect(effect_id):
        raise NotFoundError(f"Effect {effect_id} not found")
    return MessageResponse(success=True, message="Effect deleted")


@router.get("/pending", response_model=list[SubmissionItem], dependencies=[Depends(require_admin)])
def list_pending() -> list[SubmissionItem]:
    return [SubmissionItem(**s.to_dict()) for s in container.submissions.pending()]


@router.post("/moderate", response_model=ModerateResponse, dependencies=[Depends(require_admin)])
def moderate(body: ModerateRequest) -> ModerateResponse:
    """Approve or reject a pending submission."""
    effect = container.submissions.moderate(body.submission_id, body.action)
    return ModerateResponse(
        success=True,
        message="Effect approved" if effect else "Effect rejected",
        effect_id=effect.id if effect else None,
    )
