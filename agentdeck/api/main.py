"""
FastAPI Application — Agent Console State API

Serves the per-session state behind the five console screens
(Overview, Workflow, Tooling, Validation, DataVault).

CORS: Configured via environment variables.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agentdeck.config import Settings, settings as default_settings
from agentdeck.session import SessionStore
from .routes import router
from .schemas import HealthResponse


# Configure logging
logging.basicConfig(level=default_settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(config: Optional[Settings] = None, clock=None) -> FastAPI:
    """
    Build the application with its own SessionStore.

    Args:
        config: Settings override (defaults to the environment settings).
        clock: Optional callable returning an aware datetime, used for
               log timestamps and sync times.
    """
    config = config or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        logger.info(f"🚀 Starting {config.PROJECT_NAME}")
        logger.info(f"📍 Running in {config.ENVIRONMENT} mode")
        yield
        # Shutdown
        logger.info(f"👋 Shutting down {config.PROJECT_NAME} ({len(app.state.sessions)} sessions dropped)")

    app = FastAPI(
        title=config.PROJECT_NAME,
        description="In-memory UI state for the agent console screens",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Owned here, injected into routes; never a module-level singleton
    app.state.sessions = SessionStore(config, clock=clock)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(router)

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint — points to docs."""
        return {
            "message": f"{config.PROJECT_NAME} API",
            "docs": "/docs",
            "health": "/health",
        }

    @app.get("/ping", tags=["Health"])
    async def ping():
        """Lightweight heartbeat."""
        return {"status": "ok"}

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check. State is in memory only, so this never degrades."""
        return HealthResponse(
            status="healthy",
            sessions=len(app.state.sessions),
            message="All state is held in memory.",
        )

    return app


app = create_app()
