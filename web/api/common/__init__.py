"""Shared API schema helpers."""

from web.api.common.schemas import CamelModel, MessageResponse

__all__ = ["CamelModel", "MessageResponse"]
