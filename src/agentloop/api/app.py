"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agentloop import __version__
from agentloop.api.errors import register_exception_handlers
from agentloop.api.routes import board
from agentloop.config import ConfigurationError, load_settings
from agentloop.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = get_logger("api")


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Configuration is re-read on every request; startup only reports it.
    """
    try:
        settings = load_settings()
        logger.info("Agent Loop API started for %s", settings.repo)
    except ConfigurationError as e:
        logger.warning("Agent Loop API started without valid configuration: %s", e)
    yield
    logger.info("Agent Loop API stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Agent Loop API",
        description="Kanban dashboard over a GitHub issue tracker",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(board.router, prefix="/api")

    return app


# Default app instance
app = create_app()
