"""
Movies Router - CRUD endpoints over the movie registry

Bodies are decoded inside the handlers: an unknown ID on PUT is reported
before a malformed body, and malformed bodies yield 400 rather than 422.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request

from movie_registry.errors import MovieNotFoundError
from api.schemas.movies import Movie, parse_movie
from api.dependencies import get_repository
from api.repositories.base import BaseMovieRepository

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/movies", response_model=List[Movie])
async def list_movies(
    repo: BaseMovieRepository = Depends(get_repository)
) -> List[Movie]:
    """Return every movie in collection order."""
    return repo.list_movies()


@router.get("/movies/{movie_id}", response_model=Movie)
async def get_movie(
    movie_id: str,
    repo: BaseMovieRepository = Depends(get_repository)
) -> Movie:
    """Return a single movie by ID."""
    return repo.get_movie(movie_id)


@router.post("/movies", response_model=Movie)
async def create_movie(
    request: Request,
    repo: BaseMovieRepository = Depends(get_repository)
) -> Movie:
    """
    Create a movie from the JSON body.

    The server assigns a fresh ID, ignoring any ID in the body.
    """
    movie = parse_movie(await request.body(), message="Invalid JSON")
    return repo.create_movie(movie)


@router.put("/movies/{movie_id}", response_model=Movie)
async def update_movie(
    movie_id: str,
    request: Request,
    repo: BaseMovieRepository = Depends(get_repository)
) -> Movie:
    """
    Replace a movie with the JSON body, keeping the path ID.

    The collection is only touched once the body has been decoded, so a
    malformed body leaves the original record in place. The updated movie
    moves to the end of the collection.
    """
    if not repo.exists(movie_id):
        raise MovieNotFoundError(movie_id)

    movie = parse_movie(await request.body(), message="Invalid request body")
    return repo.replace_movie(movie_id, movie)


@router.delete("/movies/{movie_id}", response_model=List[Movie])
async def delete_movie(
    movie_id: str,
    repo: BaseMovieRepository = Depends(get_repository)
) -> List[Movie]:
    """Delete a movie and return the remaining collection."""
    return repo.delete_movie(movie_id)
