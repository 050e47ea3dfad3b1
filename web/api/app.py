"""FastAPI application factory."""

from fastapi import FastAPI

from app.container import container
from web.api import admin, effects, stats, submissions, voting
from web.api.errors import register_error_handlers


def create_app() -> FastAPI:
    """Build the API. The container must be initialized (or is, with settings defaults)."""
    container.init()

    app = FastAPI(title="Mandela Archive API", version="0.1.0")
    register_error_handlers(app)

    app.include_router(effects.router)
    app.include_router(stats.router)
    app.include_router(voting.router)
    app.include_router(submissions.router)
    app.include_router(admin.router)

    @app.get("/healthz")
    def healthz() -> dict:
        return {"ok": True, "backend": container.backend}

    return app
