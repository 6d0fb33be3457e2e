"""Pydantic schemas for show requests and responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from quickshow.schemas.movie import MovieResponse


class ShowInput(BaseModel):
    """One date and the times of day to screen on it."""

    date: str = Field(..., description="Show date (YYYY-MM-DD)")
    time: list[str] = Field(default_factory=list, description="Times of day (HH:MM)")


class AddShowRequest(BaseModel):
    """
    Body of ``POST /shows``.

    All fields are optional at the schema level so that missing values are
    reported through the service's own validation message.
    """

    model_config = ConfigDict(populate_by_name=True)

    movie_id: str | int | None = Field(None, alias="movieId")
    shows_input: list[ShowInput] | None = Field(None, alias="showsInput")
    show_price: float | None = Field(None, alias="showPrice")


class ActionResponse(BaseModel):
    """Outcome of a request that has no payload beyond a message."""

    success: bool
    message: str


class NowPlayingResponse(BaseModel):
    """Movies currently in cinemas, as returned by TMDb."""

    success: bool = True
    movies: list[dict[str, Any]]


class NowPlayingErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: str


class UpcomingShowsResponse(BaseModel):
    """Distinct movies that have at least one upcoming show."""

    success: bool = True
    shows: list[MovieResponse]


class ShowtimeSlot(BaseModel):
    """A single showtime within a date bucket."""

    model_config = ConfigDict(populate_by_name=True)

    time: datetime
    show_id: int = Field(..., alias="showId")


class ShowtimesResponse(BaseModel):
    """A movie and its upcoming showtimes grouped by UTC date."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    movie: MovieResponse | None = None
    date_time: dict[str, list[ShowtimeSlot]] = Field(default_factory=dict, alias="dateTime")
