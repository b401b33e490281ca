"""Error taxonomy for the Beatport client."""

from beatport_client.errors.exceptions import (
    ApiError,
    BadRequestError,
    BeatportError,
    ClientError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from beatport_client.errors.handler import raise_for_status

__all__ = [
    "ApiError",
    "BadRequestError",
    "BeatportError",
    "ClientError",
    "DecodeError",
    "ForbiddenError",
    "NotFoundError",
    "ParseError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "raise_for_status",
]
