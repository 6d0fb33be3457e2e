"""Pydantic schemas for movie data."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MovieBase(BaseModel):
    """Base movie schema with common fields."""

    title: str
    overview: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None
    genres: list[dict[str, Any]] = Field(default_factory=list)
    casts: list[dict[str, Any]] = Field(default_factory=list)
    release_date: str | None = None
    original_language: str | None = None
    tagline: str = ""
    vote_average: float | None = None
    runtime: int | None = None


class MovieResponse(MovieBase):
    """Movie response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
