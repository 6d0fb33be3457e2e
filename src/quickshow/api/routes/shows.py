"""Show API endpoints."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from quickshow.api.dependencies import (
    get_ingestion_service,
    get_query_service,
    get_tmdb_client,
)
from quickshow.exceptions import QuickShowError, ValidationError
from quickshow.schemas import (
    ActionResponse,
    AddShowRequest,
    MovieResponse,
    NowPlayingErrorResponse,
    NowPlayingResponse,
    ShowtimeSlot,
    ShowtimesResponse,
    UpcomingShowsResponse,
)
from quickshow.services.show_ingestion import ShowIngestionService
from quickshow.services.show_queries import ShowQueryService
from quickshow.services.tmdb_client import TMDbClient

logger = logging.getLogger(__name__)
router = APIRouter()


def failure(error: Exception, status_code: int = 200) -> JSONResponse:
    """Convert an exception caught at the route boundary into a ``success: false`` body."""
    if isinstance(error, QuickShowError):
        message = error.message
    else:
        message = str(error) or error.__class__.__name__
    body = ActionResponse(success=False, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def describe_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic error details into one line, e.g. ``showPrice: Input should be a valid number``."""
    parts = []
    for err in errors:
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Invalid request: " + "; ".join(parts)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer request bodies of the wrong shape with HTTP 400 and a ``success: false`` body."""
    message = describe_validation_errors(exc.errors())
    logger.warning(f"Rejected {request.method} {request.url.path}: {message}")
    body = ActionResponse(success=False, message=message)
    return JSONResponse(status_code=400, content=body.model_dump())


@router.get(
    "/now-playing",
    response_model=NowPlayingResponse,
    responses={500: {"model": NowPlayingErrorResponse}},
)
async def get_now_playing_movies(
    tmdb_client: TMDbClient = Depends(get_tmdb_client),
) -> NowPlayingResponse | JSONResponse:
    """Movies currently in cinemas, straight from TMDb."""
    try:
        movies = await tmdb_client.get_now_playing()
    except Exception as e:
        logger.error(f"Error fetching now playing movies: {e}", exc_info=True)
        body = NowPlayingErrorResponse(
            message="Failed to fetch now playing movies",
            error=getattr(e, "message", str(e)),
        )
        return JSONResponse(status_code=500, content=body.model_dump())

    return NowPlayingResponse(movies=movies)


@router.post(
    "/shows",
    response_model=ActionResponse,
    responses={400: {"model": ActionResponse}},
)
async def add_show(
    request: AddShowRequest,
    service: ShowIngestionService = Depends(get_ingestion_service),
) -> ActionResponse | JSONResponse:
    """
    Schedule shows for a movie.

    The movie is fetched from TMDb and stored first if it is not known yet.
    Missing or malformed input is answered with HTTP 400; any other failure
    with HTTP 200 and ``success: false``.
    """
    try:
        message = await service.add_show(
            request.movie_id,
            request.shows_input,
            request.show_price,
        )
    except ValidationError as e:
        return failure(e, status_code=400)
    except QuickShowError as e:
        logger.error(f"Error adding shows for movie {request.movie_id}: {e.message}")
        return failure(e)
    except Exception as e:
        logger.error(f"Unexpected error adding shows for movie {request.movie_id}: {e}", exc_info=True)
        return failure(e)

    return ActionResponse(success=True, message=message)


@router.get("/shows", response_model=UpcomingShowsResponse)
async def get_shows(
    service: ShowQueryService = Depends(get_query_service),
) -> UpcomingShowsResponse | JSONResponse:
    """Distinct movies with at least one upcoming show."""
    try:
        movies = await service.list_upcoming_movies()
    except Exception as e:
        logger.error(f"Error listing upcoming shows: {e}", exc_info=True)
        return failure(e)

    return UpcomingShowsResponse(shows=[MovieResponse.model_validate(m) for m in movies])


@router.get("/shows/{movie_id}", response_model=ShowtimesResponse)
async def get_show(
    movie_id: str,
    service: ShowQueryService = Depends(get_query_service),
) -> ShowtimesResponse | JSONResponse:
    """Upcoming showtimes of one movie grouped by date."""
    try:
        showtimes = await service.get_showtimes(movie_id)
    except Exception as e:
        logger.error(f"Error fetching showtimes for movie {movie_id}: {e}", exc_info=True)
        return failure(e)

    return ShowtimesResponse(
        movie=MovieResponse.model_validate(showtimes.movie) if showtimes.movie else None,
        date_time={
            day: [ShowtimeSlot(time=entry.time, show_id=entry.show_id) for entry in entries]
            for day, entries in showtimes.dates_to_times.items()
        },
    )
