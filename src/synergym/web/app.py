"""FastAPI application for the synergym REST API."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..clients import CoachGateway, HttpCoachClient
from ..data.exercise_loader import seed_exercises
from ..db.engine import get_db_path, init_db
from ..errors import (
    ConflictError,
    NotFoundError,
    PartialOperationError,
    SynergymError,
    UpstreamError,
)
from .routers import coach, exercises, likes, routines, users

logger = logging.getLogger(__name__)


def _status_for(exc: Exception) -> int:
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, ConflictError):
        return 409
    if isinstance(exc, UpstreamError):
        return 502
    return 500


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(UpstreamError)
    async def upstream_error(request: Request, exc: UpstreamError):
        return JSONResponse(
            status_code=502,
            content={
                "detail": str(exc),
                "upstream_status": exc.status_code,
                "upstream_body": exc.body,
            },
        )

    @app.exception_handler(PartialOperationError)
    async def partial_operation(request: Request, exc: PartialOperationError):
        return JSONResponse(
            status_code=_status_for(exc.__cause__),
            content={"detail": str(exc), "routine": exc.routine.to_dict()},
        )

    @app.exception_handler(SynergymError)
    async def synergym_error(request: Request, exc: SynergymError):
        return JSONResponse(status_code=_status_for(exc), content={"detail": str(exc)})


def create_app(db_path: Path | None = None, coach_gateway: CoachGateway | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    db_path = db_path or get_db_path()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler - runs on startup and shutdown."""
        # Startup: create or migrate the schema, then seed an empty catalog
        logger.info(f"Using database at {db_path}")
        await init_db(db_path)
        await seed_exercises(db_path)
        yield

    app = FastAPI(
        title="synergym",
        description="Fitness tracking API: exercises, routines and likes",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.db_path = db_path
    app.state.coach = coach_gateway or HttpCoachClient()

    _register_error_handlers(app)

    # Include routers
    app.include_router(users.router)
    app.include_router(exercises.router)
    app.include_router(routines.router)
    app.include_router(likes.router)
    app.include_router(coach.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
