"""Pydantic schemas for API requests and responses."""

from quickshow.schemas.movie import MovieResponse
from quickshow.schemas.show import (
    ActionResponse,
    AddShowRequest,
    NowPlayingErrorResponse,
    NowPlayingResponse,
    ShowInput,
    ShowtimeSlot,
    ShowtimesResponse,
    UpcomingShowsResponse,
)

__all__ = [
    "MovieResponse",
    "ActionResponse",
    "AddShowRequest",
    "NowPlayingErrorResponse",
    "NowPlayingResponse",
    "ShowInput",
    "ShowtimeSlot",
    "ShowtimesResponse",
    "UpcomingShowsResponse",
]
