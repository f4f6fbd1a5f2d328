"""
Movie Registry - FastAPI Application

Main entry point for the API server.
Environment-agnostic: configuration reads from settings (.env file).
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from movie_registry import __version__
from movie_registry.errors import MovieRegistryError
from movie_registry.logging_setup import setup_logging
from movie_registry.settings import Settings, get_settings
from api.dependencies import AppState, lifespan_handler
from api.routers import movies, health

# Get settings
cfg = get_settings()

# Configure logging
setup_logging(cfg.log_level)
logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """Map registry errors to plain-text responses."""

    @app.exception_handler(MovieRegistryError)
    async def registry_error_handler(request: Request, exc: MovieRegistryError):
        logger.warning(
            f"{request.method} {request.url.path} -> {exc.status_code} {exc.message}"
        )
        return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        settings: Overrides the settings read from the environment

    Returns:
        Configured FastAPI application instance with its own registry
    """
    if settings is None:
        settings = cfg

    app = FastAPI(
        title="Movie Registry API",
        description="In-memory create/read/update/delete API for movie records",
        version=__version__,
        lifespan=lifespan_handler,  # Handles startup/shutdown
        redirect_slashes=False  # "/movies/" is a 404, not a redirect
    )
    app.state.app_state = AppState(settings)

    # CORS configuration from settings
    logger.info(f"Configuring CORS with origins: {settings.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    # Mount routers
    app.include_router(movies.router, tags=["movies"])
    app.include_router(health.router, prefix="/health", tags=["health"])

    @app.get("/")
    async def root():
        """Root endpoint - API info"""
        return {
            "name": "Movie Registry API",
            "version": __version__,
            "environment": settings.env,
            "status": "running",
            "docs": "/docs",
            "health": "/health/ready"
        }

    logger.info(f"FastAPI application created (env={settings.env})")

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    logger.info(f"Starting server on {cfg.api_host}:{cfg.api_port}")
    logger.info(f"Environment: {cfg.env}")
    logger.info(f"Reload: {cfg.api_reload}")

    uvicorn.run(
        "api.main:app",
        host=cfg.api_host,
        port=cfg.api_port,
        reload=cfg.api_reload,
        log_level=cfg.log_level.lower()
    )


if __name__ == "__main__":
    run()
