"""FastAPI application for the gym-planner API."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .. import __version__
from ..db.engine import get_db_path, init_db, seed_exercises
from .routers import exercises, plans

logger = logging.getLogger(__name__)


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler - runs on startup and shutdown."""
        # Startup: make sure the schema and catalog exist
        path = app.state.db_path
        if not path.exists():
            logger.info("Initializing database at %s", path)
            await init_db(path)
            await seed_exercises(path)
        yield

    app = FastAPI(
        title="gym-planner",
        description="Workout plan generator API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path or get_db_path()

    app.include_router(exercises.router)
    app.include_router(plans.router)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        # Malformed requests are client errors, same as InvalidRequest
        return JSONResponse(
            status_code=400,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
