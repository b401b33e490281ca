"""Testing utilities for code built on beatport_client.

``FakeBeatport`` stands in for the provider behind an ``httpx.MockTransport``.
It answers the three handshake legs and catalog GETs, records every request,
and lets a test replace any endpoint's response.

Example:
    ```python
    from beatport_client import authenticate
    from beatport_client.testing import FakeBeatport


    async def test_search():
        provider = FakeBeatport(catalog={"tracks": {"results": []}})
        client = await authenticate("key", "secret", "user", "pass", transport=provider.transport)
        assert await client.get("tracks", {"q": "test"}) == {"results": []}
    ```
"""

from typing import Any, Callable
from urllib.parse import urlencode

import httpx

from beatport_client.auth.handshake import ACCESS_TOKEN_PATH, AUTHORIZE_SUBMIT_PATH, REQUEST_TOKEN_PATH

Responder = Callable[[httpx.Request], httpx.Response]


def form_response(status_code: int = 200, **fields: str) -> httpx.Response:
    """Form-encoded response like the ones the OAuth endpoints send."""
    return httpx.Response(
        status_code,
        content=urlencode(fields).encode(),
        headers={"content-type": "application/x-www-form-urlencoded"},
    )


class FakeBeatport:
    """In-memory Beatport provider for ``httpx.MockTransport``."""

    def __init__(self, catalog: dict[str, Any] | None = None):
        self.catalog = catalog if catalog is not None else {}
        self.requests: list[httpx.Request] = []
        self.overrides: dict[str, httpx.Response | Responder] = {}

        self.request_token = ("request-token", "request-secret")
        self.authorized = ("authorized-token", "verifier-123")
        self.access_token = ("access-token", "access-secret")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def override(self, path: str, response: httpx.Response | Responder) -> None:
        """Answer ``path`` (e.g. ``"identity/1/oauth/request-token"``) with ``response``."""
        self.overrides[path.strip("/")] = response

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.strip("/") == path.strip("/")]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.strip("/")

        if path in self.overrides:
            override = self.overrides[path]
            return override(request) if callable(override) else override

        if path == REQUEST_TOKEN_PATH:
            token, secret = self.request_token
            return form_response(oauth_token=token, oauth_token_secret=secret, oauth_callback_confirmed="true")
        if path == AUTHORIZE_SUBMIT_PATH:
            token, verifier = self.authorized
            return form_response(oauth_token=token, oauth_verifier=verifier)
        if path == ACCESS_TOKEN_PATH:
            token, secret = self.access_token
            return form_response(oauth_token=token, oauth_token_secret=secret)
        if path.startswith("catalog/3/"):
            method = path.removeprefix("catalog/3/")
            if method in self.catalog:
                return httpx.Response(200, json=self.catalog[method])
        return httpx.Response(404, json={"error": f"Unknown resource {path}"})


__all__ = ["FakeBeatport", "form_response"]
