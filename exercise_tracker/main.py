"""Exercise Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExerciseTrackerError → `{"error": ...}` / plain text
    - CORS configured from settings (not hardcoded)
    - The store handle lives on app.state.db_manager, created in the lifespan

Design Decisions:
    - create_app(settings) factory: tests build isolated apps and inject their own
      session manager without touching module globals
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Static files mounted under /public so they never shadow /api routes
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from exercise_tracker.api.error_handlers import register_error_handlers
from exercise_tracker.api.routes import health, landing, users
from exercise_tracker.config import Settings, get_settings
from exercise_tracker.infrastructure.database import DatabaseSessionManager
from exercise_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_all:
        await db_manager.create_all()
    app.state.db_manager = db_manager
    logger.info("Exercise Tracker API started")
    yield
    logger.info("Exercise Tracker API shutting down")
    await db_manager.close()
    app.state.db_manager = None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its middleware, routes and error handlers."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Exercise Tracker API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_manager = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(landing.router)
    app.include_router(health.router)
    app.include_router(users.router)

    if os.path.isdir(settings.static_dir):
        app.mount(
            "/public", StaticFiles(directory=settings.static_dir), name="static",
        )

    register_error_handlers(app)
    return app


app = create_app()
