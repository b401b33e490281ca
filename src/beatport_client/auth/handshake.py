"""Beatport's three-legged OAuth 1.0a handshake with a username/password grant.

The provider does not redirect a browser. The client submits the user's
login itself, so all three legs are plain signed POSTs:

| Leg | Endpoint | Signs with (token, token_secret) | Produces |
|-----|----------|----------------------------------|----------|
| 1 | request-token | (none, none) | oauth_token, oauth_token_secret |
| 2 | authorize-submit | (none, none) | oauth_token, oauth_verifier |
| 3 | access-token | (leg 2 oauth_token, leg 1 oauth_token_secret) | final oauth_token, oauth_token_secret |

Each leg's decoded response is turned into its own frozen result type, and
leg 3 is signed from those results only. Any failure aborts the handshake.

Example:
    ```python
    from beatport_client.auth.credentials import UserCredentials
    from beatport_client.auth.handshake import Handshake
    from beatport_client.transport import create_http_client

    async with create_http_client() as http_client:
        handshake = Handshake(UserCredentials(key, secret, username, password), http_client)
        session = await handshake.run()
    ```
"""

import enum
import logging
from dataclasses import dataclass
from typing import Mapping

import httpx

from beatport_client.auth.credentials import AuthorizedSession, CredentialSet, UserCredentials
from beatport_client.auth.decoder import decode
from beatport_client.auth.exceptions import AuthenticationError
from beatport_client.auth.signer import sign, validate_consumer
from beatport_client.errors.exceptions import BeatportError, TransportError
from beatport_client.transport.http import send

logger = logging.getLogger(__name__)

REQUEST_TOKEN_PATH = "identity/1/oauth/request-token"
AUTHORIZE_SUBMIT_PATH = "identity/1/oauth/authorize-submit"
ACCESS_TOKEN_PATH = "identity/1/oauth/access-token"


class HandshakeState(enum.Enum):
    UNAUTHENTICATED = "unauthenticated"
    REQUEST_TOKEN_OBTAINED = "request_token_obtained"
    USER_AUTHORIZED = "user_authorized"
    ACCESS_TOKEN_OBTAINED = "access_token_obtained"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestToken:
    """Leg 1 result: temporary token and its secret."""

    token: str
    token_secret: str


@dataclass(frozen=True)
class AuthorizedRequestToken:
    """Leg 2 result: token approved by the user login, plus the verifier."""

    token: str
    verifier: str


@dataclass(frozen=True)
class AccessToken:
    """Leg 3 result: the long-lived access token pair."""

    token: str
    token_secret: str


def access_token_credentials(
    consumer: CredentialSet, request_token: RequestToken, authorized: AuthorizedRequestToken
) -> CredentialSet:
    """Credentials that sign leg 3.

    The token comes from the authorize-submit response while the secret is
    the one issued with the request token.
    """
    return consumer.with_token(authorized.token, request_token.token_secret)


class Handshake:
    """Runs the three legs once and produces an AuthorizedSession.

    A Handshake is single use. After ``run()`` it is either in
    ``ACCESS_TOKEN_OBTAINED`` or ``FAILED`` and cannot be run again.
    """

    def __init__(self, user_credentials: UserCredentials, http_client: httpx.AsyncClient):
        self._user = user_credentials
        self._http = http_client
        self._consumer = user_credentials.consumer()
        self.state = HandshakeState.UNAUTHENTICATED

        validate_consumer(self._consumer)

    async def run(self) -> AuthorizedSession:
        """Execute legs 1 to 3 in order.

        Raises:
            AuthenticationError: A leg was rejected or its response lacked a
                required field. ``leg`` says which one.
            TransportError: A leg could not reach the provider.
            RuntimeError: The handshake was already run.

        Any exception, cancellation included, leaves the handshake in
        ``FAILED``.
        """
        if self.state is not HandshakeState.UNAUTHENTICATED:
            raise RuntimeError(f"Handshake cannot be run from state {self.state.value}")

        try:
            request_token = await self._obtain_request_token()
            self.state = HandshakeState.REQUEST_TOKEN_OBTAINED

            authorized = await self._submit_user_credentials(request_token)
            self.state = HandshakeState.USER_AUTHORIZED

            access_token = await self._obtain_access_token(request_token, authorized)
            self.state = HandshakeState.ACCESS_TOKEN_OBTAINED
        except BaseException:
            self.state = HandshakeState.FAILED
            raise

        logger.info(f"Authorized Beatport user {self._user.username}")
        return AuthorizedSession(self._consumer.with_token(access_token.token, access_token.token_secret))

    async def _obtain_request_token(self) -> RequestToken:
        fields = await self._post(1, self._consumer, REQUEST_TOKEN_PATH, {"oauth_callback": "oob"})
        self._require(1, fields, "oauth_token", "oauth_token_secret")
        return RequestToken(token=fields["oauth_token"], token_secret=fields["oauth_token_secret"])

    async def _submit_user_credentials(self, request_token: RequestToken) -> AuthorizedRequestToken:
        # authorize-submit only needs the request token itself, not its secret
        params = {
            "oauth_token": request_token.token,
            "username": self._user.username,
            "password": self._user.password,
            "submit": "Login",
        }
        fields = await self._post(2, self._consumer, AUTHORIZE_SUBMIT_PATH, params)
        self._require(2, fields, "oauth_token", "oauth_verifier")
        return AuthorizedRequestToken(token=fields["oauth_token"], verifier=fields["oauth_verifier"])

    async def _obtain_access_token(
        self, request_token: RequestToken, authorized: AuthorizedRequestToken
    ) -> AccessToken:
        credentials = access_token_credentials(self._consumer, request_token, authorized)
        fields = await self._post(3, credentials, ACCESS_TOKEN_PATH, {"oauth_verifier": authorized.verifier})
        self._require(3, fields, "oauth_token", "oauth_token_secret")
        return AccessToken(token=fields["oauth_token"], token_secret=fields["oauth_token_secret"])

    async def _post(
        self, leg: int, credentials: CredentialSet, path: str, params: Mapping[str, str]
    ) -> dict[str, str]:
        url = str(self._http.base_url.join(path))
        logger.debug(f"Leg {leg}: POST {url}")

        request = sign(credentials, "POST", url, params)
        try:
            response = await send(self._http, request, leg=leg)
        except TransportError:
            logger.warning(f"Leg {leg} could not reach {url}")
            raise

        if not response.is_success:
            logger.warning(f"Leg {leg} rejected with HTTP {response.status_code}")
            raise AuthenticationError(
                f"{path} returned HTTP {response.status_code}: {response.text[:200]}",
                leg=leg,
                cause=response,
            )

        try:
            return decode(response.content)
        except BeatportError as e:
            raise AuthenticationError(f"{path} returned an undecodable body", leg=leg, cause=e) from e

    @staticmethod
    def _require(leg: int, fields: Mapping[str, str], *keys: str) -> None:
        missing = [key for key in keys if not fields.get(key)]
        if missing:
            logger.warning(f"Leg {leg} response is missing {', '.join(missing)}")
            raise AuthenticationError(f"Response is missing {', '.join(missing)}", leg=leg, cause=dict(fields))
