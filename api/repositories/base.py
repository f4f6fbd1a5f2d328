"""
Base Repository - Abstract interface for movie storage

This defines the contract that all repository implementations must follow.
Implementations own their collection and are responsible for making every
operation atomic.
"""

from abc import ABC, abstractmethod
from typing import List

from api.schemas.movies import Movie


class BaseMovieRepository(ABC):
    """Abstract base class for movie repositories"""

    @abstractmethod
    def list_movies(self) -> List[Movie]:
        """
        Get every movie in collection order.

        Returns:
            List of movies (possibly empty)
        """
        pass

    @abstractmethod
    def get_movie(self, movie_id: str) -> Movie:
        """
        Get the first movie whose ID matches.

        Raises:
            MovieNotFoundError: If no movie has this ID
        """
        pass

    @abstractmethod
    def create_movie(self, movie: Movie) -> Movie:
        """
        Store a new movie at the end of the collection.

        Any ID on the incoming movie is replaced by a newly generated one.

        Returns:
            The stored movie including its generated ID
        """
        pass

    @abstractmethod
    def replace_movie(self, movie_id: str, movie: Movie) -> Movie:
        """
        Replace an existing movie, keeping its ID.

        The old record is removed and the new one is appended at the end
        of the collection.

        Raises:
            MovieNotFoundError: If no movie has this ID
        """
        pass

    @abstractmethod
    def delete_movie(self, movie_id: str) -> List[Movie]:
        """
        Remove a movie.

        Returns:
            The remaining movies in collection order

        Raises:
            MovieNotFoundError: If no movie has this ID
        """
        pass

    @abstractmethod
    def exists(self, movie_id: str) -> bool:
        """Check whether a movie with this ID is stored"""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored movies"""
        pass
