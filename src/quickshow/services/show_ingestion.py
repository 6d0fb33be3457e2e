"""Show ingestion: make sure a movie is stored locally, then schedule its shows."""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any
from zoneinfo import ZoneInfo

from quickshow.config import settings
from quickshow.exceptions import ValidationError
from quickshow.models.movie import Movie
from quickshow.repositories import MovieRepository, ShowRepository
from quickshow.schemas.show import ShowInput
from quickshow.services.tmdb_client import TMDbClient
from quickshow.utils.dates import combine_show_datetime

logger = logging.getLogger(__name__)

MAX_CAST = 10
SHOW_ADDED_MESSAGE = "Show added successfully"
MISSING_FIELDS_MESSAGE = "Missing required fields (movieId, showsInput, showPrice)"


class ShowIngestionService:
    """
    Service that turns an admin's show schedule into stored shows.

    Steps:
    1. Validate the request and expand the date/time matrix
    2. Look up the movie locally
    3. If missing, fetch details and credits from TMDb in parallel and store it
    4. Insert all shows in one batch
    """

    def __init__(
        self,
        movies: MovieRepository,
        shows: ShowRepository,
        tmdb_client: TMDbClient,
        tz: ZoneInfo | None = None,
    ) -> None:
        self.movies = movies
        self.shows = shows
        self.tmdb_client = tmdb_client
        self.tz = tz or ZoneInfo(settings.show_timezone)

    async def add_show(
        self,
        movie_id: str | int | None,
        shows_input: Iterable[ShowInput] | None,
        show_price: float | None,
    ) -> str:
        """
        Schedule shows for a movie, creating the movie from TMDb if needed.

        Args:
            movie_id: TMDb movie ID
            shows_input: Dates, each with the times of day to screen on it
            show_price: Ticket price applied to every created show

        Returns:
            Confirmation message

        Raises:
            ValidationError: Missing fields or malformed date/time strings
            UpstreamError: TMDb could not provide the movie
            PersistenceError: The database rejected a read or write
        """
        # An empty schedule is allowed; it only stores the movie.
        if not movie_id or shows_input is None or not show_price:
            raise ValidationError(MISSING_FIELDS_MESSAGE)

        movie_id = str(movie_id)
        rows = self.expand_shows(movie_id, shows_input, show_price)

        movie = await self.ensure_movie(movie_id)

        if rows:
            await self.shows.insert_many(rows)
        logger.info(f"Scheduled {len(rows)} shows for {movie.title!r} ({movie_id})")
        return SHOW_ADDED_MESSAGE

    def expand_shows(
        self, movie_id: str, shows_input: Iterable[ShowInput], show_price: float
    ) -> list[dict[str, Any]]:
        """
        Expand the date/time matrix into one show row per (date, time) pair.

        Rows follow input order: dates as given, times within a date as given.
        """
        rows: list[dict[str, Any]] = []
        for entry in shows_input:
            for show_time in entry.time:
                try:
                    show_date_time = combine_show_datetime(entry.date, show_time, self.tz)
                except ValueError as e:
                    raise ValidationError(
                        f"Invalid show date/time {entry.date!r} {show_time!r}: {e}"
                    ) from e
                rows.append(
                    {
                        "movie_id": movie_id,
                        "show_date_time": show_date_time,
                        "show_price": show_price,
                        "occupied_seats": {},
                    }
                )
        return rows

    async def ensure_movie(self, movie_id: str) -> Movie:
        """Return the stored movie, fetching it from TMDb and storing it if absent."""
        movie = await self.movies.get(movie_id)
        if movie:
            return movie

        logger.info(f"Movie {movie_id} not stored yet, fetching from TMDb")
        details, credits = await asyncio.gather(
            self.tmdb_client.get_movie_details(movie_id),
            self.tmdb_client.get_movie_credits(movie_id),
        )
        return await self.movies.create(self.build_movie_fields(movie_id, details, credits))

    def build_movie_fields(
        self, movie_id: str, details: dict[str, Any], credits: dict[str, Any]
    ) -> dict[str, Any]:
        return {
            "id": movie_id,
            "title": details.get("title") or "",
            "overview": details.get("overview"),
            "poster_path": details.get("poster_path"),
            "backdrop_path": details.get("backdrop_path"),
            "genres": details.get("genres") or [],
            "casts": self.tmdb_client.extract_cast(credits, n=MAX_CAST),
            "release_date": details.get("release_date"),
            "original_language": details.get("original_language"),
            "tagline": details.get("tagline") or "",
            "vote_average": details.get("vote_average"),
            "runtime": details.get("runtime"),
        }
