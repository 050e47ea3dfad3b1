"""API errors and validation helpers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from app.errors import (
    AppError,
    AuthError,
    NotFoundError,
    StorageError,
    ValidationError,
)

__all__ = [
    "AppError",
    "AuthError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
    "parse_effect_id",
    "register_error_handlers",
]


def parse_effect_id(raw: str) -> int:
    """Numeric effect id from a path segment."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid effect ID: {raw!r}") from None


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.opt(exception=exc).error("{} {} failed: {}", request.method, request.url.path, exc.message)
    else:
        logger.debug("{} {} -> {}: {}", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()) if p != 'body')}: {err.get('msg')}" for err in exc.errors()
    )
    return error_response(400, f"Invalid request: {problems}")


def register_error_handlers(app: FastAPI) -> None:
    """Map the error taxonomy to JSON error responses."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
