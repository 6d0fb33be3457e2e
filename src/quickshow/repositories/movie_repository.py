"""Read/write access to persisted movies."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quickshow.exceptions import PersistenceError
from quickshow.models.movie import Movie

logger = logging.getLogger(__name__)


class MovieRepository:
    """Movie lookups and creation keyed by TMDb ID."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get(self, movie_id: str) -> Movie | None:
        """Find a movie by its TMDb ID."""
        try:
            return await self.db.get(Movie, movie_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError(f"Failed to load movie {movie_id}: {e}") from e

    async def create(self, fields: dict[str, Any]) -> Movie:
        """
        Insert a movie, or return the existing row if one with the same ID
        was created after the caller last looked.

        Args:
            fields: Column values, including ``id``

        Returns:
            The stored movie
        """
        movie = Movie(**fields)
        try:
            async with self.db.begin_nested():
                self.db.add(movie)
                await self.db.flush()
        except IntegrityError:
            existing = await self.get(movie.id)
            if existing:
                logger.info(f"Movie {movie.id!r} created concurrently, reusing existing row")
                return existing
            raise PersistenceError(f"Failed to create movie {movie.id}")
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError(f"Failed to create movie {movie.id}: {e}") from e

        logger.info(f"Stored movie {movie.id!r} ({movie.title})")
        return movie
