"""
API Dependencies - Application state and FastAPI dependency injection

Each application owns one AppState holding the movie repository. The state is
seeded during startup and handed to routers through Depends.
"""

import logging
import threading
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Request

from movie_registry.seed import SEED_MOVIES
from movie_registry.settings import Settings, get_settings
from api.repositories.base import BaseMovieRepository
from api.repositories.memory import InMemoryMovieRepository
from api.schemas.movies import Movie

logger = logging.getLogger(__name__)


class AppState:
    """
    Application state - owns the movie repository.

    One instance per application, shared across all requests.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings if settings is not None else get_settings()
        self.repository: Optional[BaseMovieRepository] = None

        # State tracking for lazy initialization
        self._initialized = False
        self._initialization_lock = threading.Lock()

    def initialize(self) -> None:
        """
        Create the repository and load the seed movies.

        Safe to call more than once; only the first call has an effect.
        """
        with self._initialization_lock:
            if self._initialized:
                logger.debug("AppState already initialized")
                return

            logger.info("Initializing AppState...")
            seed = []
            if self.settings.seed_movies:
                seed = [Movie.model_validate(record) for record in SEED_MOVIES]
                logger.info(f"Seeding registry with {len(seed)} movies")
            else:
                logger.info("Seeding disabled, registry starts empty")

            self.repository = InMemoryMovieRepository(seed)
            self._initialized = True
            logger.info("AppState initialization complete!")

    def is_ready(self) -> bool:
        """Check if app is ready to serve requests"""
        return self._initialized and self.repository is not None

    def get_status(self) -> dict:
        """Get current initialization status"""
        return {
            "initialized": self._initialized,
            "ready": self.is_ready(),
            "movie_count": self.repository.count() if self.repository is not None else 0,
        }


def get_app_state(request: Request) -> AppState:
    """
    FastAPI dependency to access app state.

    Usage in routers:
        @router.get("/example")
        async def example(state: AppState = Depends(get_app_state)):
            repo = state.repository
            ...
    """
    state: AppState = request.app.state.app_state
    # Lifespan did not run (e.g. TestClient used outside a with-block)
    if not state.is_ready():
        logger.warning("AppState not initialized, initializing synchronously...")
        state.initialize()
    return state


def get_repository(request: Request) -> BaseMovieRepository:
    """
    FastAPI dependency to access the movie repository.

    Usage in routers:
        @router.get("/example")
        async def example(repo: BaseMovieRepository = Depends(get_repository)):
            movies = repo.list_movies()
            ...
    """
    return get_app_state(request).repository


@asynccontextmanager
async def lifespan_handler(app):
    """
    FastAPI lifespan context manager for startup/shutdown.

    Usage in main.py:
        app = FastAPI(lifespan=lifespan_handler)
    """
    logger.info("FastAPI starting up...")
    app.state.app_state.initialize()

    yield  # App is now running

    logger.info("FastAPI shutting down...")
    logger.info("Shutdown complete")
