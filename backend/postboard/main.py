"""Postboard API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PostboardError -> {"error"|"message": str} responses
    - CORS configured from settings (not hardcoded)
    - Storage handle opened on startup and released on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: one place owns the connection lifecycle
    - run() is the `postboard` console entry point (uvicorn, host/port from settings)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from postboard.api.error_handlers import register_error_handlers
from postboard.api.routes import health, posts, users
from postboard.config import get_settings
from postboard.infrastructure.database import close_db, init_db
from postboard.infrastructure.observability import (
    register_request_logging, setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    await init_db(settings.database_url)
    logger.info("Postboard API started")
    try:
        yield
    finally:
        await close_db()
        logger.info("Postboard API shut down")


app = FastAPI(title="Postboard API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(posts.router)

register_error_handlers(app)
register_request_logging(app)


def run() -> None:
    """Serve the API with uvicorn."""
    uvicorn.run(
        "postboard.main:app", host=settings.host, port=settings.port,
    )
