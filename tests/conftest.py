"""Pytest configuration and shared fixtures for beatport-client tests."""

import base64
import hashlib
import hmac
import os
from urllib.parse import parse_qsl, quote, unquote

import httpx
import pytest
from oauthlib.oauth1.rfc5849.utils import parse_authorization_header

from beatport_client.auth.credentials import UserCredentials
from beatport_client.testing import FakeBeatport


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    test_prefixes = ("TEST_", "BEATPORT_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def provider():
    """Fake Beatport provider with a small catalog."""
    return FakeBeatport(catalog={"tracks": {"results": []}})


@pytest.fixture
def user_credentials():
    return UserCredentials(
        consumer_key="consumer-key",
        consumer_secret="consumer-secret",
        username="dj-user",
        password="hunter2",
    )


def collect_oauth_params(request: httpx.Request) -> list[tuple[str, str]]:
    """All parameters covered by the signature of a sent request."""
    params = parse_qsl(request.url.query.decode(), keep_blank_values=True)
    if "authorization" in request.headers:
        header = parse_authorization_header(request.headers["authorization"])
        params.extend((key, unquote(value)) for key, value in header if key != "realm")
    if request.headers.get("content-type") == "application/x-www-form-urlencoded":
        params.extend(parse_qsl(request.content.decode(), keep_blank_values=True))
    return params


def expected_signature(method, url, params, consumer_secret, token_secret=""):
    """HMAC-SHA1 computed by hand from RFC 5849 section 3.4."""
    pairs = sorted((quote(k, safe=""), quote(v, safe="")) for k, v in params if k != "oauth_signature")
    normalized = "&".join(f"{k}={v}" for k, v in pairs)
    base_string = "&".join([method.upper(), quote(url, safe=""), quote(normalized, safe="")])
    key = f"{quote(consumer_secret, safe='')}&{quote(token_secret, safe='')}"
    digest = hmac.new(key.encode(), base_string.encode(), hashlib.sha1).digest()
    return base64.b64encode(digest).decode()


@pytest.fixture
def oauth_params():
    return collect_oauth_params


@pytest.fixture
def signed_with():
    """Checker telling whether a sent request was signed with a given secret pair."""

    def check(request: httpx.Request, consumer_secret: str, token_secret: str = "") -> bool:
        params = collect_oauth_params(request)
        signature = dict(params)["oauth_signature"]
        base_url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        return signature == expected_signature(request.method, base_url, params, consumer_secret, token_secret)

    return check
