"""TMDb API client for fetching movie metadata."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from quickshow.config import settings
from quickshow.exceptions import UpstreamError, UpstreamErrorKind

logger = logging.getLogger(__name__)

RETRYABLE_STATUSES = frozenset({429, 500, 502, 503, 504})

# Raised after the request left the process but before a response arrived
NO_RESPONSE_ERRORS = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
    httpx.ProxyError,
)


@dataclass(frozen=True)
class TMDbClientConfig:
    """Connection and retry policy for :class:`TMDbClient`."""

    api_key: str
    base_url: str = "https://api.themoviedb.org/3"
    timeout: float = 8.0
    max_retries: int = 3
    retry_delay: float = 1.0
    retry_statuses: frozenset[int] = RETRYABLE_STATUSES

    @classmethod
    def from_settings(cls) -> "TMDbClientConfig":
        return cls(
            api_key=settings.tmdb_api_key,
            base_url=settings.tmdb_base_url,
            timeout=settings.tmdb_timeout,
            max_retries=settings.tmdb_max_retries,
            retry_delay=settings.tmdb_retry_delay,
        )

    def delay_before(self, attempt: int) -> float:
        """Seconds to wait before retry number *attempt* (1-based). Grows linearly."""
        return attempt * self.retry_delay


class TMDbClient:
    """Client for The Movie Database (TMDb) API."""

    def __init__(self, config: TMDbClientConfig | None = None) -> None:
        """
        Initialize TMDb client.

        Args:
            config: Connection and retry policy (built from settings if not provided)
        """
        self.config = config or TMDbClientConfig.from_settings()
        if not self.config.api_key:
            logger.warning("TMDb API key not configured")

    async def fetch(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        GET a TMDb resource, retrying transient failures.

        Network failures and responses with a status in ``retry_statuses``
        are retried up to ``max_retries`` times, waiting ``n * retry_delay``
        seconds before the n-th retry. Anything else fails immediately.

        Args:
            path: Resource path relative to the base URL, e.g. ``/movie/550``
            params: Optional query parameters

        Returns:
            Decoded JSON body

        Raises:
            UpstreamError: When the request fails for good
        """
        url = f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Accept": "application/json",
        }

        attempt = 0
        while True:
            try:
                return await self._request(url, headers, params)
            except UpstreamError as e:
                if attempt >= self.config.max_retries or not self._is_retryable(e):
                    logger.error(f"TMDb request to {path} failed: {e.message}")
                    raise
                attempt += 1
                delay = self.config.delay_before(attempt)
                logger.warning(
                    f"TMDb request to {path} failed ({e.message}), "
                    f"retry {attempt}/{self.config.max_retries} in {delay:g}s"
                )
                await asyncio.sleep(delay)

    async def _request(
        self, url: str, headers: dict[str, str], params: dict[str, Any] | None
    ) -> dict[str, Any]:
        """Perform a single attempt and normalise every failure into UpstreamError."""
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await client.get(url, headers=headers, params=params)
        except NO_RESPONSE_ERRORS as e:
            raise UpstreamError(
                "No response received from TMDb API",
                kind=UpstreamErrorKind.NO_RESPONSE,
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise UpstreamError(
                f"Error setting up request: {e}",
                kind=UpstreamErrorKind.REQUEST_SETUP,
            ) from e

        if response.status_code >= 400:
            provider_message = self._provider_message(response)
            raise UpstreamError(
                f"TMDb API Error: {response.status_code} - {provider_message or 'Unknown error'}",
                kind=UpstreamErrorKind.RESPONSE,
                status_code=response.status_code,
                provider_message=provider_message,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                f"TMDb API returned invalid JSON: {e}",
                kind=UpstreamErrorKind.RESPONSE,
                status_code=response.status_code,
            ) from e

    def _is_retryable(self, error: UpstreamError) -> bool:
        if error.kind is UpstreamErrorKind.NO_RESPONSE:
            return True
        return (
            error.kind is UpstreamErrorKind.RESPONSE
            and error.status_code in self.config.retry_statuses
        )

    @staticmethod
    def _provider_message(response: httpx.Response) -> str | None:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            return body.get("status_message")
        return None

    async def get_now_playing(self) -> list[dict[str, Any]]:
        """
        Get movies currently in cinemas.

        Returns:
            The ``results`` list of TMDb's now-playing endpoint
        """
        data = await self.fetch("/movie/now_playing")
        return data.get("results", [])

    async def get_movie_details(self, movie_id: str) -> dict[str, Any]:
        """Get detailed movie information by TMDb ID."""
        return await self.fetch(f"/movie/{movie_id}")

    async def get_movie_credits(self, movie_id: str) -> dict[str, Any]:
        """Get cast and crew for a movie by TMDb ID."""
        return await self.fetch(f"/movie/{movie_id}/credits")

    def extract_cast(self, credits: dict[str, Any], n: int = 10) -> list[dict[str, Any]]:
        """
        Extract top-billed cast entries from TMDb credits.

        Args:
            credits: TMDb credits data
            n: Maximum number of cast entries to return

        Returns:
            Cast records in billing order (up to n)
        """
        cast = credits.get("cast") or []
        return list(cast[:n])
