"""Persistence access for movies and shows."""

from quickshow.repositories.movie_repository import MovieRepository
from quickshow.repositories.show_repository import ShowRepository

__all__ = ["MovieRepository", "ShowRepository"]
