"""SQLAlchemy ORM models."""

from quickshow.models.base import Base
from quickshow.models.movie import Movie
from quickshow.models.show import Show

__all__ = ["Base", "Movie", "Show"]
