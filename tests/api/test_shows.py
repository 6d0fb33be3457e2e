"""Tests for the shows API endpoints."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock
from zoneinfo import ZoneInfo

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from quickshow.api.dependencies import (
    get_ingestion_service,
    get_query_service,
    get_tmdb_client,
)
from quickshow.exceptions import PersistenceError, UpstreamError, UpstreamErrorKind
from quickshow.models.movie import Movie
from quickshow.models.show import Show
from quickshow.services.show_ingestion import ShowIngestionService
from quickshow.services.show_queries import ShowQueryService
from quickshow.services.tmdb_client import TMDbClient, TMDbClientConfig

UTC = timezone.utc

ADD_SHOW_PAYLOAD = {
    "movieId": "tt1",
    "showsInput": [{"date": "2030-05-01", "time": ["10:00", "14:00"]}],
    "showPrice": 200,
}

SAMPLE_DETAILS = {
    "id": 1,
    "title": "Test Movie",
    "overview": "A test.",
    "genres": [{"id": 18, "name": "Drama"}],
    "original_language": "en",
    "vote_average": 7.1,
    "runtime": 118,
}


# ---------------------------------------------------------------------------
# Test data helpers
# ---------------------------------------------------------------------------


def make_movie(id: str = "tt1", title: str = "Test Movie") -> Movie:
    return Movie(
        id=id,
        title=title,
        overview="A test.",
        poster_path="/poster.jpg",
        backdrop_path=None,
        genres=[{"id": 18, "name": "Drama"}],
        casts=[],
        release_date="2030-04-20",
        original_language="en",
        tagline="",
        vote_average=7.1,
        runtime=118,
    )


def make_show(show_id: int, movie: Movie, start: datetime) -> Show:
    s = Show(
        id=show_id,
        movie_id=movie.id,
        show_date_time=start,
        show_price=200.0,
        occupied_seats={},
    )
    s.movie = movie
    return s


def make_tmdb_client() -> TMDbClient:
    client = TMDbClient(TMDbClientConfig(api_key="test-key"))
    client.get_movie_details = AsyncMock(return_value=SAMPLE_DETAILS)
    client.get_movie_credits = AsyncMock(return_value={"cast": []})
    return client


async def request(app: FastAPI, method: str, url: str, **kwargs):
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as client:
            return await client.request(method, url, **kwargs)
    finally:
        app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# GET /api/now-playing
# ---------------------------------------------------------------------------


async def test_now_playing_returns_movies(test_app: FastAPI) -> None:
    tmdb = MagicMock()
    tmdb.get_now_playing = AsyncMock(return_value=[{"id": 603692, "title": "John Wick: Chapter 4"}])
    test_app.dependency_overrides[get_tmdb_client] = lambda: tmdb

    response = await request(test_app, "GET", "/api/now-playing")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "movies": [{"id": 603692, "title": "John Wick: Chapter 4"}],
    }


async def test_now_playing_failure_returns_500(test_app: FastAPI) -> None:
    tmdb = MagicMock()
    tmdb.get_now_playing = AsyncMock(
        side_effect=UpstreamError(
            "TMDb API Error: 401 - Invalid API key",
            kind=UpstreamErrorKind.RESPONSE,
            status_code=401,
        )
    )
    test_app.dependency_overrides[get_tmdb_client] = lambda: tmdb

    response = await request(test_app, "GET", "/api/now-playing")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Failed to fetch now playing movies",
        "error": "TMDb API Error: 401 - Invalid API key",
    }


# ---------------------------------------------------------------------------
# POST /api/shows
# ---------------------------------------------------------------------------


async def test_add_show_creates_movie_and_shows(test_app: FastAPI, movie_repo, show_repo) -> None:
    service = ShowIngestionService(movie_repo, show_repo, make_tmdb_client(), tz=ZoneInfo("UTC"))
    test_app.dependency_overrides[get_ingestion_service] = lambda: service

    response = await request(test_app, "POST", "/api/shows", json=ADD_SHOW_PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Show added successfully"}
    assert "tt1" in movie_repo.rows
    assert [s.show_date_time for s in show_repo.rows] == [
        datetime(2030, 5, 1, 10, 0, tzinfo=UTC),
        datetime(2030, 5, 1, 14, 0, tzinfo=UTC),
    ]


async def test_add_show_missing_fields_returns_400(test_app: FastAPI, movie_repo, show_repo) -> None:
    service = ShowIngestionService(movie_repo, show_repo, make_tmdb_client(), tz=ZoneInfo("UTC"))
    test_app.dependency_overrides[get_ingestion_service] = lambda: service

    payload = {"movieId": "tt1", "showsInput": ADD_SHOW_PAYLOAD["showsInput"]}
    response = await request(test_app, "POST", "/api/shows", json=payload)

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Missing required fields (movieId, showsInput, showPrice)",
    }
    assert show_repo.rows == []


async def test_add_show_malformed_time_returns_400(test_app: FastAPI, movie_repo, show_repo) -> None:
    service = ShowIngestionService(movie_repo, show_repo, make_tmdb_client(), tz=ZoneInfo("UTC"))
    test_app.dependency_overrides[get_ingestion_service] = lambda: service

    payload = {**ADD_SHOW_PAYLOAD, "showsInput": [{"date": "2030-05-01", "time": ["noon"]}]}
    response = await request(test_app, "POST", "/api/shows", json=payload)

    assert response.status_code == 400
    assert response.json()["success"] is False


async def test_add_show_time_not_a_list_returns_400(test_app: FastAPI) -> None:
    service = MagicMock()
    service.add_show = AsyncMock()
    test_app.dependency_overrides[get_ingestion_service] = lambda: service

    payload = {**ADD_SHOW_PAYLOAD, "showsInput": [{"date": "2030-05-01", "time": "10:00"}]}
    response = await request(test_app, "POST", "/api/shows", json=payload)

    assert response.status_code == 400
    data = response.json()
    assert set(data) == {"success", "message"}
    assert data["success"] is False
    assert "showsInput.0.time" in data["message"]
    service.add_show.assert_not_awaited()


async def test_add_show_non_numeric_price_returns_400(test_app: FastAPI) -> None:
    service = MagicMock()
    service.add_show = AsyncMock()
    test_app.dependency_overrides[get_ingestion_service] = lambda: service

    response = await request(test_app, "POST", "/api/shows", json={**ADD_SHOW_PAYLOAD, "showPrice": "abc"})

    assert response.status_code == 400
    data = response.json()
    assert set(data) == {"success", "message"}
    assert data["success"] is False
    assert "showPrice" in data["message"]
    service.add_show.assert_not_awaited()


async def test_add_show_empty_schedule_stores_movie(test_app: FastAPI, movie_repo, show_repo) -> None:
    service = ShowIngestionService(movie_repo, show_repo, make_tmdb_client(), tz=ZoneInfo("UTC"))
    test_app.dependency_overrides[get_ingestion_service] = lambda: service

    response = await request(test_app, "POST", "/api/shows", json={**ADD_SHOW_PAYLOAD, "showsInput": []})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Show added successfully"}
    assert "tt1" in movie_repo.rows
    assert show_repo.rows == []


async def test_add_show_upstream_failure_returns_200_with_false(test_app: FastAPI) -> None:
    service = MagicMock()
    service.add_show = AsyncMock(
        side_effect=UpstreamError(
            "No response received from TMDb API", kind=UpstreamErrorKind.NO_RESPONSE
        )
    )
    test_app.dependency_overrides[get_ingestion_service] = lambda: service

    response = await request(test_app, "POST", "/api/shows", json=ADD_SHOW_PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "No response received from TMDb API"}


async def test_add_show_persistence_failure_returns_200_with_false(test_app: FastAPI) -> None:
    service = MagicMock()
    service.add_show = AsyncMock(side_effect=PersistenceError("Failed to insert shows: boom"))
    test_app.dependency_overrides[get_ingestion_service] = lambda: service

    response = await request(test_app, "POST", "/api/shows", json=ADD_SHOW_PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "Failed to insert shows: boom"}


async def test_add_show_passes_body_fields_to_service(test_app: FastAPI) -> None:
    service = MagicMock()
    service.add_show = AsyncMock(return_value="Show added successfully")
    test_app.dependency_overrides[get_ingestion_service] = lambda: service

    await request(test_app, "POST", "/api/shows", json={**ADD_SHOW_PAYLOAD, "movieId": 603692})

    movie_id, shows_input, show_price = service.add_show.await_args.args
    assert movie_id == 603692
    assert shows_input[0].date == "2030-05-01"
    assert shows_input[0].time == ["10:00", "14:00"]
    assert show_price == 200


# ---------------------------------------------------------------------------
# GET /api/shows
# ---------------------------------------------------------------------------


async def test_get_shows_returns_distinct_upcoming_movies(
    test_app: FastAPI, movie_repo, show_repo
) -> None:
    soon = datetime.now(UTC) + timedelta(days=1)
    a, b = make_movie("1", "Alpha"), make_movie("2", "Beta")
    shows = [
        make_show(1, a, soon),
        make_show(2, b, soon + timedelta(hours=1)),
        make_show(3, a, soon + timedelta(hours=2)),
    ]
    for show in shows:
        movie_repo.rows[show.movie_id] = show.movie
        show_repo.rows.append(show)
    test_app.dependency_overrides[get_query_service] = lambda: ShowQueryService(movie_repo, show_repo)

    response = await request(test_app, "GET", "/api/shows")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert [m["id"] for m in data["shows"]] == ["1", "2"]
    assert data["shows"][0]["title"] == "Alpha"
    assert data["shows"][0]["genres"] == [{"id": 18, "name": "Drama"}]


async def test_get_shows_failure_returns_200_with_false(test_app: FastAPI) -> None:
    service = MagicMock()
    service.list_upcoming_movies = AsyncMock(side_effect=PersistenceError("Failed to query shows"))
    test_app.dependency_overrides[get_query_service] = lambda: service

    response = await request(test_app, "GET", "/api/shows")

    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "Failed to query shows"}


# ---------------------------------------------------------------------------
# GET /api/shows/{movie_id}
# ---------------------------------------------------------------------------


async def test_get_show_groups_times_by_date(test_app: FastAPI, movie_repo, show_repo) -> None:
    movie = make_movie("tt1")
    movie_repo.rows["tt1"] = movie
    show_repo.rows.extend(
        [
            make_show(1, movie, datetime(2030, 5, 1, 10, 0, tzinfo=UTC)),
            make_show(2, movie, datetime(2030, 5, 1, 14, 0, tzinfo=UTC)),
            make_show(3, movie, datetime(2030, 5, 2, 18, 0, tzinfo=UTC)),
        ]
    )
    test_app.dependency_overrides[get_query_service] = lambda: ShowQueryService(movie_repo, show_repo)

    response = await request(test_app, "GET", "/api/shows/tt1")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["movie"]["id"] == "tt1"
    assert list(data["dateTime"]) == ["2030-05-01", "2030-05-02"]
    assert [slot["showId"] for slot in data["dateTime"]["2030-05-01"]] == [1, 2]
    assert data["dateTime"]["2030-05-02"][0]["time"].startswith("2030-05-02T18:00:00")


async def test_get_show_for_unknown_movie(test_app: FastAPI, movie_repo, show_repo) -> None:
    test_app.dependency_overrides[get_query_service] = lambda: ShowQueryService(movie_repo, show_repo)

    response = await request(test_app, "GET", "/api/shows/unknown")

    assert response.status_code == 200
    assert response.json() == {"success": True, "movie": None, "dateTime": {}}


async def test_get_show_failure_returns_200_with_false(test_app: FastAPI) -> None:
    service = MagicMock()
    service.get_showtimes = AsyncMock(side_effect=RuntimeError("boom"))
    test_app.dependency_overrides[get_query_service] = lambda: service

    response = await request(test_app, "GET", "/api/shows/tt1")

    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "boom"}
