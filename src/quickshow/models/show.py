"""Show model for scheduled screenings of a movie."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quickshow.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from quickshow.models.movie import Movie


class Show(Base, TimestampMixin):
    """
    Show (screening) model.

    One row per movie/date-time pair. ``occupied_seats`` maps a seat label
    to the occupant's identifier and starts out empty.
    """

    __tablename__ = "shows"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    movie_id: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    show_date_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    show_price: Mapped[float] = mapped_column(Float, nullable=False)
    occupied_seats: Mapped[dict[str, str]] = mapped_column(JSON, nullable=False, default=dict)

    # Relationships
    movie: Mapped["Movie"] = relationship(back_populates="shows")

    def __repr__(self) -> str:
        return (
            f"<Show(id={self.id!r}, "
            f"movie_id={self.movie_id!r}, "
            f"show_date_time={self.show_date_time})>"
        )
