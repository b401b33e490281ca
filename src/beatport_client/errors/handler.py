"""Error handling utilities for HTTP responses."""

import httpx

from beatport_client.errors.exceptions import (
    ApiError,
    BadRequestError,
    ClientError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)

_EXCEPTION_MAP: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching ApiError subclass for a non-2xx response.

    The exception carries the status code and the full response body so
    callers can inspect what Beatport sent back.

    Args:
        response: HTTP response object

    Raises:
        ApiError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code

    if status_code in _EXCEPTION_MAP:
        exc_class = _EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = ApiError

    body = response.text
    snippet = body[:200]
    message = f"HTTP {status_code}: {snippet}" if snippet else f"HTTP {status_code}"

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise RateLimitError(
            message=message,
            retry_after=retry_after,
            status_code=status_code,
            body=body,
            response=response,
        )

    raise exc_class(
        message=message,
        status_code=status_code,
        body=body,
        response=response,
    )
