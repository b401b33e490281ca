"""Structured exceptions for Beatport API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class BeatportError(Exception):
    """Base exception for everything raised by beatport_client."""

    pass


class TransportError(BeatportError):
    """Network or connection failure, including timeouts.

    Attributes:
        leg: Handshake leg (1, 2 or 3) the failure happened in, or None for
            catalog calls.
    """

    def __init__(self, message: str, leg: int | None = None):
        super().__init__(message)
        self.leg = leg


class DecodeError(BeatportError):
    """A response body could not be decoded into the expected structure."""

    pass


class ParseError(DecodeError):
    """A form-encoded handshake response body could not be parsed."""

    pass


class ApiError(BeatportError):
    """Non-2xx response from the catalog API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.response = response


class ClientError(ApiError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(ApiError):
    """5xx server errors."""

    pass
