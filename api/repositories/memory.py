"""
In-Memory Repository - Process-local movie storage

Keeps movies in an ordered list guarded by a mutex. Nothing is persisted:
the collection lives as long as the process.
"""

import logging
import threading
import uuid
from typing import Iterable, List, Optional

from movie_registry.errors import MovieNotFoundError
from api.schemas.movies import Movie
from api.repositories.base import BaseMovieRepository

logger = logging.getLogger(__name__)


class InMemoryMovieRepository(BaseMovieRepository):
    """Repository implementation backed by a locked Python list"""

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._lock = threading.Lock()
        self._movies: List[Movie] = [m.model_copy(deep=True) for m in (movies or [])]
        logger.info(f"InMemoryMovieRepository initialized with {len(self._movies)} movies")

    def _index_of(self, movie_id: str) -> int:
        # Caller must hold self._lock
        for index, item in enumerate(self._movies):
            if item.id == movie_id:
                return index
        raise MovieNotFoundError(movie_id)

    def list_movies(self) -> List[Movie]:
        with self._lock:
            return [m.model_copy(deep=True) for m in self._movies]

    def get_movie(self, movie_id: str) -> Movie:
        with self._lock:
            movie = self._movies[self._index_of(movie_id)]
            logger.debug(f"Found movie {movie_id}")
            return movie.model_copy(deep=True)

    def create_movie(self, movie: Movie) -> Movie:
        stored = movie.model_copy(update={"id": str(uuid.uuid4())}, deep=True)
        with self._lock:
            self._movies.append(stored)
        logger.info(f"Created movie {stored.id} ({stored.title!r})")
        return stored.model_copy(deep=True)

    def replace_movie(self, movie_id: str, movie: Movie) -> Movie:
        stored = movie.model_copy(update={"id": movie_id}, deep=True)
        with self._lock:
            del self._movies[self._index_of(movie_id)]
            self._movies.append(stored)
        logger.info(f"Updated movie {movie_id}")
        return stored.model_copy(deep=True)

    def delete_movie(self, movie_id: str) -> List[Movie]:
        with self._lock:
            del self._movies[self._index_of(movie_id)]
            remaining = [m.model_copy(deep=True) for m in self._movies]
        logger.info(f"Deleted movie {movie_id}, {len(remaining)} remaining")
        return remaining

    def exists(self, movie_id: str) -> bool:
        with self._lock:
            return any(m.id == movie_id for m in self._movies)

    def count(self) -> int:
        with self._lock:
            return len(self._movies)
