"""Shared test fixtures."""

from datetime import datetime
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from quickshow.api.routes import health, shows
from quickshow.models.movie import Movie
from quickshow.models.show import Show


class InMemoryMovieRepository:
    """Dict-backed stand-in for MovieRepository."""

    def __init__(self) -> None:
        self.rows: dict[str, Movie] = {}
        self.create_calls = 0

    async def get(self, movie_id: str) -> Movie | None:
        return self.rows.get(movie_id)

    async def create(self, fields: dict[str, Any]) -> Movie:
        self.create_calls += 1
        movie = Movie(**fields)
        self.rows.setdefault(movie.id, movie)
        return self.rows[movie.id]


class InMemoryShowRepository:
    """List-backed stand-in for ShowRepository; ids are assigned in insertion order."""

    def __init__(self, movies: InMemoryMovieRepository) -> None:
        self.movies = movies
        self.rows: list[Show] = []
        self.insert_calls = 0

    async def insert_many(self, rows: list[dict[str, Any]]) -> list[Show]:
        self.insert_calls += 1
        created = []
        for row in rows:
            show = Show(id=len(self.rows) + 1, **row)
            show.movie = self.movies.rows.get(show.movie_id)
            self.rows.append(show)
            created.append(show)
        return created

    async def find_upcoming(self, now: datetime) -> list[Show]:
        upcoming = [s for s in self.rows if s.show_date_time >= now]
        return sorted(upcoming, key=lambda s: s.show_date_time)

    async def find_upcoming_for_movie(self, movie_id: str, now: datetime) -> list[Show]:
        return [s for s in self.rows if s.movie_id == movie_id and s.show_date_time >= now]


@pytest.fixture
def movie_repo() -> InMemoryMovieRepository:
    return InMemoryMovieRepository()


@pytest.fixture
def show_repo(movie_repo: InMemoryMovieRepository) -> InMemoryShowRepository:
    return InMemoryShowRepository(movie_repo)


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without the admin UI or lifespan, for API tests."""
    app = FastAPI()
    app.add_exception_handler(RequestValidationError, shows.request_validation_handler)
    app.include_router(health.router)
    app.include_router(shows.router, prefix="/api")
    return app
