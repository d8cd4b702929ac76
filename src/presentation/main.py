"""
FastAPI Application Entry Point.

This is the main entry point for the Looking Hotel Assistant API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.infrastructure.config.logging_config import configure_logging
from src.infrastructure.config.settings import get_settings
from src.presentation.api.dependencies import SharedClients
from src.presentation.api.routers import (
    edge_router,
    chats_router,
    hotel_router,
    booking_router,
    analytics_router,
    mcp_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    settings = get_settings()
    logger.info("Starting Looking Hotel Assistant on %s:%s", settings.host, settings.port)
    logger.info("MCP server: %s", settings.mcp_url)
    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY is not set; chat requests will fail")

    yield

    # Shutdown
    logger.info("Shutting down Looking Hotel Assistant")
    await app.state.clients.aclose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Looking Hotel Assistant",
        description="Chat-based hotel booking assistant with an analytics dashboard",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.clients = SharedClients.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=[
            "authorization",
            "x-client-info",
            "apikey",
            "content-type",
            "x-client-id",
        ],
    )

    # Include routers
    app.include_router(edge_router)
    app.include_router(chats_router)
    app.include_router(hotel_router)
    app.include_router(booking_router)
    app.include_router(analytics_router)
    app.include_router(mcp_router)

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Looking Hotel Assistant",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
