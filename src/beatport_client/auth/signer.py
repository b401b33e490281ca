"""OAuth 1.0a HMAC-SHA1 request signing.

Signing is delegated to ``oauthlib.oauth1.Client``, which builds the RFC 5849
signature base string from the method, the base URL and the normalized
parameters (including the nonce and timestamp).

Two placements are supported:

- ``"header"``: OAuth parameters travel in an ``Authorization: OAuth ...``
  header. For POST requests the ``params`` become a form-encoded body that is
  covered by the signature. Used for the handshake legs.
- ``"query"``: ``params`` and the OAuth parameters all travel in the query
  string. Used for catalog GET requests.

Example:
    ```python
    from beatport_client.auth.credentials import CredentialSet
    from beatport_client.auth.signer import sign

    credentials = CredentialSet("consumer-key", "consumer-secret", "token", "token-secret")
    signed = sign(credentials, "GET", "https://oauth-api.beatport.com/catalog/3/tracks", {"q": "test"}, placement="query")
    ```
"""

from dataclasses import dataclass, field
from typing import Literal, Mapping
from urllib.parse import parse_qsl, urlencode, urlsplit

from oauthlib.oauth1 import SIGNATURE_HMAC_SHA1, SIGNATURE_TYPE_AUTH_HEADER, SIGNATURE_TYPE_QUERY, Client

from beatport_client.auth.credentials import CredentialSet
from beatport_client.auth.exceptions import ConfigurationError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

Placement = Literal["header", "query"]

_SIGNATURE_TYPES = {
    "header": SIGNATURE_TYPE_AUTH_HEADER,
    "query": SIGNATURE_TYPE_QUERY,
}


@dataclass(frozen=True)
class SignedRequest:
    """A request ready to be handed to the HTTP transport."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None

    @property
    def params(self) -> dict[str, str]:
        """Query string parameters of the signed URL."""
        return dict(parse_qsl(urlsplit(self.url).query, keep_blank_values=True))


def validate_consumer(credentials: CredentialSet) -> None:
    """Raise ConfigurationError unless the consumer key and secret are set."""
    if not credentials.consumer_key:
        raise ConfigurationError("consumer_key cannot be empty")
    if not credentials.consumer_secret:
        raise ConfigurationError("consumer_secret cannot be empty")


def sign(
    credentials: CredentialSet,
    method: str,
    url: str,
    params: Mapping[str, str] | None = None,
    *,
    placement: Placement = "header",
    nonce: str | None = None,
    timestamp: str | int | None = None,
) -> SignedRequest:
    """Sign a request with HMAC-SHA1.

    Args:
        credentials: Consumer pair, plus the token pair once one exists.
        method: HTTP method.
        url: Absolute request URL without a query string.
        params: Form or query parameters to send and sign.
        placement: Where the OAuth parameters go, ``"header"`` or ``"query"``.
        nonce: Fixed nonce. Generated when omitted.
        timestamp: Fixed timestamp. Current time when omitted.

    Returns:
        The signed request. Nothing is sent.

    Raises:
        ConfigurationError: If the consumer key or secret is empty.
    """
    validate_consumer(credentials)

    method = method.upper()
    if placement not in _SIGNATURE_TYPES:
        raise ValueError(f"Unknown signature placement: {placement!r}")

    client = Client(
        credentials.consumer_key,
        client_secret=credentials.consumer_secret,
        resource_owner_key=credentials.token or None,
        resource_owner_secret=credentials.token_secret or None,
        signature_method=SIGNATURE_HMAC_SHA1,
        signature_type=_SIGNATURE_TYPES[placement],
        nonce=nonce,
        timestamp=str(timestamp) if timestamp is not None else None,
    )

    encoded = urlencode(list((params or {}).items()))
    headers: dict[str, str] = {}
    body = None

    if method in ("GET", "HEAD", "DELETE") or placement == "query":
        if encoded:
            url = f"{url}?{encoded}"
    elif encoded:
        body = encoded
        headers["Content-Type"] = FORM_CONTENT_TYPE

    signed_url, signed_headers, signed_body = client.sign(url, http_method=method, body=body, headers=headers)
    return SignedRequest(method=method, url=signed_url, headers=dict(signed_headers), body=signed_body)
