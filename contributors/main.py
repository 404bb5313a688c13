"""Contributors API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ContributorsError -> structured JSON responses
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from contributors.api.error_handlers import register_error_handlers
from contributors.api.routes import health, contributors, sync
from contributors.config import get_settings
from contributors.infrastructure.database import init_db
from contributors.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Contributors API started")
    yield
    await manager.dispose()
    logger.info("Contributors API shutting down")


app = FastAPI(
    title="Contributors API", version="1.0.0", lifespan=lifespan,
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(contributors.router)
app.include_router(sync.router)

register_error_handlers(app)
