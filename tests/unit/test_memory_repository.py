"""Unit tests for the in-memory movie repository."""
import threading

import pytest

from movie_registry.errors import MovieNotFoundError
from api.repositories.memory import InMemoryMovieRepository
from api.schemas.movies import Director, Movie


@pytest.fixture
def repo():
    """Repository holding two movies with known IDs."""
    return InMemoryMovieRepository([
        Movie(id="1", isbn="001", title="Movie One",
              director=Director(firstname="John", lastname="Doe")),
        Movie(id="2", isbn="002", title="Movie Two",
              director=Director(firstname="Jane", lastname="Doe")),
    ])


class TestInMemoryMovieRepository:
    """Test suite for InMemoryMovieRepository."""

    def test_list_preserves_insertion_order(self, repo):
        assert [m.id for m in repo.list_movies()] == ["1", "2"]

    def test_starts_empty_without_movies(self):
        repo = InMemoryMovieRepository()
        assert repo.list_movies() == []
        assert repo.count() == 0

    def test_get_returns_matching_movie(self, repo):
        movie = repo.get_movie("2")
        assert movie.title == "Movie Two"
        assert movie.director.firstname == "Jane"

    def test_get_unknown_raises(self, repo):
        with pytest.raises(MovieNotFoundError) as exc_info:
            repo.get_movie("missing")

        assert exc_info.value.movie_id == "missing"
        assert exc_info.value.message == "Movie not found"
        assert exc_info.value.status_code == 404

    def test_create_assigns_new_id_and_appends(self, repo):
        created = repo.create_movie(Movie(id="1", isbn="003", title="Movie Three"))

        assert created.id not in ("", "1", "2")
        assert [m.id for m in repo.list_movies()] == ["1", "2", created.id]
        assert repo.get_movie(created.id).title == "Movie Three"

    def test_create_does_not_mutate_input(self, repo):
        incoming = Movie(id="client-id", title="Mine")
        repo.create_movie(incoming)
        assert incoming.id == "client-id"

    def test_replace_keeps_id_and_moves_to_end(self, repo):
        updated = repo.replace_movie("1", Movie(id="other", isbn="010", title="New One"))

        assert updated.id == "1"
        assert [m.id for m in repo.list_movies()] == ["2", "1"]
        assert repo.get_movie("1").title == "New One"
        assert not repo.exists("other")

    def test_replace_unknown_raises_and_leaves_collection(self, repo):
        with pytest.raises(MovieNotFoundError):
            repo.replace_movie("missing", Movie(title="x"))

        assert [m.id for m in repo.list_movies()] == ["1", "2"]

    def test_delete_returns_remaining(self, repo):
        remaining = repo.delete_movie("1")

        assert [m.id for m in remaining] == ["2"]
        assert not repo.exists("1")

    def test_delete_unknown_raises(self, repo):
        with pytest.raises(MovieNotFoundError):
            repo.delete_movie("missing")
        assert repo.count() == 2

    def test_returned_movies_are_copies(self, repo):
        movie = repo.get_movie("1")
        movie.title = "Changed"
        movie.director.lastname = "Changed"

        stored = repo.get_movie("1")
        assert stored.title == "Movie One"
        assert stored.director.lastname == "Doe"

    def test_concurrent_creates_are_not_lost(self):
        repo = InMemoryMovieRepository()

        def worker():
            for _ in range(50):
                repo.create_movie(Movie(title="t"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        movies = repo.list_movies()
        assert len(movies) == 400
        assert len({m.id for m in movies}) == 400
