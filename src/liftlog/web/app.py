"""FastAPI application for the liftlog JSON API."""

from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..errors import (
    AuthError,
    BackendError,
    GenerationError,
    NotFoundError,
    ValidationError,
    friendly_message,
)
from ..store import get_db_path, init_db, open_store
from .routers import ai, auth, exercises, stats, templates, trainers, workouts

logger = structlog.get_logger(__name__)


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    db_path = db_path or get_db_path()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not db_path.exists():
            await init_db(db_path)
        yield

    app = FastAPI(
        title="liftlog",
        description="Workout templates, session logging and AI-generated plans",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = open_store(db_path)

    app.include_router(auth.router)
    app.include_router(exercises.router)
    app.include_router(templates.router)
    app.include_router(workouts.router)
    app.include_router(trainers.router)
    app.include_router(ai.router)
    app.include_router(stats.router)

    register_error_handlers(app)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app


def _error_response(status_code: int, error: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": friendly_message(error)})


def register_error_handlers(app: FastAPI) -> None:
    """Map the liftlog exception types onto HTTP status codes."""

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return _error_response(400, exc)

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return _error_response(404, exc)

    @app.exception_handler(AuthError)
    async def auth_error(request: Request, exc: AuthError):
        return _error_response(401, exc)

    @app.exception_handler(BackendError)
    async def backend_error(request: Request, exc: BackendError):
        logger.error("backend_error", path=request.url.path, table=exc.table, error=exc.message)
        return _error_response(502, exc)

    @app.exception_handler(GenerationError)
    async def generation_error(request: Request, exc: GenerationError):
        logger.error("generation_error", path=request.url.path, error=str(exc))
        return _error_response(502, exc)
