"""Read/write access to persisted shows."""

import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from sqlalchemy import and_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from quickshow.exceptions import PersistenceError
from quickshow.models.show import Show

logger = logging.getLogger(__name__)


class ShowRepository:
    """Show queries and batch creation."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def insert_many(self, rows: Sequence[dict[str, Any]]) -> list[Show]:
        """
        Insert all *rows* in one flush.

        Either every show is written or, on failure, the session is rolled
        back and PersistenceError is raised.
        """
        shows = [Show(**row) for row in rows]
        try:
            self.db.add_all(shows)
            await self.db.flush()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError(f"Failed to insert shows: {e}") from e

        logger.info(f"Inserted {len(shows)} shows")
        return shows

    async def find_upcoming(self, now: datetime) -> list[Show]:
        """All shows starting at or after *now*, movie loaded, earliest first."""
        stmt = (
            select(Show)
            .options(selectinload(Show.movie))
            .where(Show.show_date_time >= now)
            .order_by(Show.show_date_time)
        )
        return await self._all(stmt)

    async def find_upcoming_for_movie(self, movie_id: str, now: datetime) -> list[Show]:
        """Shows of one movie starting at or after *now*, in storage order."""
        stmt = select(Show).where(
            and_(
                Show.movie_id == movie_id,
                Show.show_date_time >= now,
            )
        )
        return await self._all(stmt)

    async def _all(self, stmt) -> list[Show]:
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError(f"Failed to query shows: {e}") from e
        return list(result.scalars().all())
