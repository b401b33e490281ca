"""Beatport Client - OAuth 1.0a authorized access to the Beatport catalog API.

Beatport requires three-legged OAuth with a username/password grant. This
library runs that handshake without a browser and signs every catalog call
with the resulting access token.

Example:
    ```python
    from beatport_client import authenticate

    client = await authenticate(consumer_key, consumer_secret, username, password)
    async with client:
        tracks = await client.get("tracks", {"q": "test"})
    ```
"""

__version__ = "0.1.0"

from beatport_client.auth.exceptions import AuthenticationError, ConfigurationError  # noqa: E402
from beatport_client.client import AuthorizedClient, authenticate  # noqa: E402
from beatport_client.errors.exceptions import (  # noqa: E402
    ApiError,
    BeatportError,
    DecodeError,
    TransportError,
)

__all__ = [
    "ApiError",
    "AuthenticationError",
    "AuthorizedClient",
    "BeatportError",
    "ConfigurationError",
    "DecodeError",
    "TransportError",
    "__version__",
    "authenticate",
]
