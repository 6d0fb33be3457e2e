"""Movie model for storing cached TMDb metadata."""

from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from quickshow.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from quickshow.models.show import Show


class Movie(Base, TimestampMixin):
    """
    Movie model.

    Keyed by the TMDb movie ID so a movie is stored at most once.
    Genres and cast are kept as the JSON records TMDb returns.
    """

    __tablename__ = "movies"

    id: Mapped[str] = mapped_column(String(100), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    overview: Mapped[str | None] = mapped_column(Text, nullable=True)
    poster_path: Mapped[str | None] = mapped_column(String(200), nullable=True)
    backdrop_path: Mapped[str | None] = mapped_column(String(200), nullable=True)
    genres: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    casts: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    release_date: Mapped[str | None] = mapped_column(String(20), nullable=True)
    original_language: Mapped[str | None] = mapped_column(String(10), nullable=True)
    tagline: Mapped[str] = mapped_column(Text, nullable=False, default="")
    vote_average: Mapped[float | None] = mapped_column(Float, nullable=True)
    runtime: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Relationships
    shows: Mapped[list["Show"]] = relationship(back_populates="movie")

    def __repr__(self) -> str:
        return f"<Movie(id={self.id!r}, title={self.title!r})>"
