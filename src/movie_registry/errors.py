"""
Domain errors for the movie registry

Each error carries the HTTP status and the plain-text message returned to the
client. The API layer registers one handler for the base class.
"""

from typing import Optional


class MovieRegistryError(Exception):
    """Base exception for all registry errors"""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MovieNotFoundError(MovieRegistryError):
    """Raised when no movie with the requested ID exists"""

    status_code = 404
    default_message = "Movie not found"

    def __init__(self, movie_id: str, message: Optional[str] = None):
        super().__init__(message)
        self.movie_id = movie_id


class InvalidMovieError(MovieRegistryError):
    """Raised when a request body cannot be decoded into a movie"""

    status_code = 400
    default_message = "Invalid JSON"
