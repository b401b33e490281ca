"""Tests for the exception hierarchy."""

import pytest
from httpx import Response

from beatport_client.auth.exceptions import AuthenticationError, ConfigurationError
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


@pytest.mark.unit
def test_api_error_instantiation():
    """Test ApiError can be instantiated with all attributes."""
    response = Response(status_code=500, text="boom")

    error = ApiError(message="Test error", status_code=500, body="boom", response=response)

    assert str(error) == "Test error"
    assert error.status_code == 500
    assert error.body == "boom"
    assert error.response == response


@pytest.mark.unit
def test_api_error_defaults():
    error = ApiError("Test error")

    assert error.status_code is None
    assert error.body == ""
    assert error.response is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc_class",
    [BadRequestError, UnauthorizedError, ForbiddenError, NotFoundError, RateLimitError],
)
def test_client_errors_inherit(exc_class):
    assert issubclass(exc_class, ClientError)
    assert issubclass(exc_class, ApiError)


@pytest.mark.unit
def test_server_error_is_not_client_error():
    assert issubclass(ServerError, ApiError)
    assert not issubclass(ServerError, ClientError)


@pytest.mark.unit
def test_rate_limit_error_retry_after():
    error = RateLimitError("Rate limited", retry_after=30, status_code=429)

    assert error.retry_after == 30
    assert error.status_code == 429


@pytest.mark.unit
def test_transport_error_leg():
    assert TransportError("refused").leg is None
    assert TransportError("refused", leg=3).leg == 3


@pytest.mark.unit
def test_parse_error_is_decode_error():
    assert issubclass(ParseError, DecodeError)


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc_class",
    [ApiError, TransportError, DecodeError, ParseError, ConfigurationError, AuthenticationError],
)
def test_everything_is_a_beatport_error(exc_class):
    assert issubclass(exc_class, BeatportError)
