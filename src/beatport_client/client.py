"""Authorized Beatport catalog client."""

import logging
from typing import Any, Mapping

import httpx

from beatport_client.auth.credentials import AuthorizedSession, UserCredentials
from beatport_client.auth.exceptions import ConfigurationError
from beatport_client.auth.handshake import Handshake
from beatport_client.auth.resolver import CredentialResolver
from beatport_client.auth.signer import sign, validate_consumer
from beatport_client.errors.exceptions import DecodeError
from beatport_client.errors.handler import raise_for_status
from beatport_client.transport.http import DEFAULT_TIMEOUT, OAUTH_URI, create_http_client, send

logger = logging.getLogger(__name__)

CATALOG_PATH = "catalog/3"

JSONValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class AuthorizedClient:
    """Signed access to the Beatport catalog.

    Built by ``authenticate`` once the handshake has succeeded. The session
    never changes, so concurrent ``get`` calls on one client are safe, and a
    failed call does not require authenticating again.

    Example:
        ```python
        async with await authenticate(key, secret, username, password) as client:
            tracks = await client.get("tracks", {"q": "test"})
        ```
    """

    def __init__(self, session: AuthorizedSession, http_client: httpx.AsyncClient):
        self._session = session
        self._http = http_client

    @property
    def session(self) -> AuthorizedSession:
        return self._session

    @classmethod
    async def from_env(
        cls,
        *,
        resolver: CredentialResolver | None = None,
        base_url: str = OAUTH_URI,
        timeout: float | httpx.Timeout | None = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "AuthorizedClient":
        """Authenticate with credentials taken from BEATPORT_* variables or .env."""
        user = (resolver or CredentialResolver()).resolve_user_credentials()
        return await _authenticate(user, base_url=base_url, timeout=timeout, transport=transport)

    async def get(self, method: str | None = None, params: Mapping[str, str] | None = None) -> JSONValue:
        """Run a signed GET against ``catalog/3/{method}``.

        Args:
            method: Catalog resource, e.g. ``"tracks"`` or ``"releases"``. When
                omitted it is taken from a ``"method"`` key in ``params``.
            params: Query parameters, passed through verbatim.

        Returns:
            The decoded JSON body.

        Raises:
            TransportError: Network failure or timeout.
            ApiError: Non-2xx response; carries status code and body.
            DecodeError: The body is not JSON.
            ConfigurationError: No catalog method was given.
        """
        query = dict(params or {})
        if method is None:
            method = query.pop("method", None)
        if not method:
            raise ConfigurationError("A catalog method is required")

        url = str(self._http.base_url.join(f"{CATALOG_PATH}/{method}"))
        request = sign(self._session.credentials, "GET", url, query, placement="query")

        logger.debug(f"GET {CATALOG_PATH}/{method} with {len(query)} params")
        response = await send(self._http, request)
        raise_for_status(response)

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Catalog response for {method} is not valid JSON: {e}") from e

    call = get

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AuthorizedClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


async def authenticate(
    consumer_key: str,
    consumer_secret: str,
    username: str,
    password: str,
    *,
    base_url: str = OAUTH_URI,
    timeout: float | httpx.Timeout | None = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AuthorizedClient:
    """Run the Beatport handshake and return a ready catalog client.

    Args:
        consumer_key: Application consumer key.
        consumer_secret: Application consumer secret.
        username: Beatport account username.
        password: Beatport account password.
        base_url: Provider base URL.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport.

    Raises:
        ConfigurationError: Empty consumer key or secret (no request is sent).
        AuthenticationError: A handshake leg failed; see ``leg``.
        TransportError: The provider could not be reached.
    """
    user = UserCredentials(
        consumer_key=consumer_key,
        consumer_secret=consumer_secret,
        username=username,
        password=password,
    )
    return await _authenticate(user, base_url=base_url, timeout=timeout, transport=transport)


async def _authenticate(
    user: UserCredentials,
    *,
    base_url: str,
    timeout: float | httpx.Timeout | None,
    transport: httpx.AsyncBaseTransport | None,
) -> AuthorizedClient:
    validate_consumer(user.consumer())

    http_client = create_http_client(base_url=base_url, timeout=timeout, transport=transport)
    try:
        session = await Handshake(user, http_client).run()
    except BaseException:
        await http_client.aclose()
        raise
    return AuthorizedClient(session, http_client)
