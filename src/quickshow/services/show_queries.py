"""Read side of the show schedule."""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone

from quickshow.models.movie import Movie
from quickshow.repositories import MovieRepository, ShowRepository
from quickshow.utils.dates import utc_date_key

logger = logging.getLogger(__name__)


@dataclass
class ShowtimeEntry:
    time: datetime
    show_id: int


@dataclass
class Showtimes:
    """Upcoming showtimes of one movie, bucketed by UTC date (``YYYY-MM-DD``)."""

    movie: Movie | None
    dates_to_times: dict[str, list[ShowtimeEntry]] = field(default_factory=dict)


class ShowQueryService:
    """Queries used by the booking front end to browse shows."""

    def __init__(self, movies: MovieRepository, shows: ShowRepository) -> None:
        self.movies = movies
        self.shows = shows

    async def list_upcoming_movies(self, now: datetime | None = None) -> list[Movie]:
        """
        Distinct movies that have at least one show at or after *now*.

        Movies are returned in order of their earliest upcoming show and
        deduplicated by movie ID.
        """
        now = now or datetime.now(timezone.utc)
        upcoming = await self.shows.find_upcoming(now)

        movies: dict[str, Movie] = {}
        for show in upcoming:
            if show.movie_id not in movies:
                movies[show.movie_id] = show.movie

        logger.debug(f"{len(upcoming)} upcoming shows across {len(movies)} movies")
        return list(movies.values())

    async def get_showtimes(self, movie_id: str, now: datetime | None = None) -> Showtimes:
        """
        Upcoming showtimes of a movie grouped by date.

        Within a date, shows keep the order the store returned them in.
        ``movie`` is None when the movie is not stored.
        """
        now = now or datetime.now(timezone.utc)
        upcoming = await self.shows.find_upcoming_for_movie(movie_id, now)
        movie = await self.movies.get(movie_id)

        dates_to_times: dict[str, list[ShowtimeEntry]] = defaultdict(list)
        for show in upcoming:
            dates_to_times[utc_date_key(show.show_date_time)].append(
                ShowtimeEntry(time=show.show_date_time, show_id=show.id)
            )

        return Showtimes(movie=movie, dates_to_times=dict(dates_to_times))
