"""Error taxonomy shared by the services and the HTTP layer."""

from enum import Enum


class QuickShowError(Exception):
    """Base class for failures reported to API clients as ``success: false``."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(QuickShowError):
    """Missing or malformed client input. Reported with HTTP 400."""


class UpstreamErrorKind(str, Enum):
    """Which stage of the provider request failed."""

    RESPONSE = "response"
    NO_RESPONSE = "no_response"
    REQUEST_SETUP = "request_setup"


class UpstreamError(QuickShowError):
    """The external metadata provider could not be reached or returned an error."""

    def __init__(
        self,
        message: str,
        kind: UpstreamErrorKind,
        status_code: int | None = None,
        provider_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.provider_message = provider_message


class PersistenceError(QuickShowError):
    """The database rejected a read or write."""
