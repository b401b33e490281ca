"""HTTP plumbing shared by the handshake and the catalog client."""

import logging

import httpx

from beatport_client import __version__
from beatport_client.auth.signer import SignedRequest
from beatport_client.errors.exceptions import TransportError

logger = logging.getLogger(__name__)

OAUTH_URI = "https://oauth-api.beatport.com"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"beatport-client/{__version__}"


def create_http_client(
    *,
    base_url: str = OAUTH_URI,
    timeout: float | httpx.Timeout | None = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the AsyncClient one Beatport client instance owns.

    Args:
        base_url: Provider base URL.
        timeout: Per-request timeout in seconds, an ``httpx.Timeout``, or None
            to disable timeouts.
        transport: Optional transport, e.g. ``httpx.MockTransport`` in tests.
    """
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        transport=transport,
        headers={"User-Agent": USER_AGENT},
    )


async def send(client: httpx.AsyncClient, request: SignedRequest, *, leg: int | None = None) -> httpx.Response:
    """Send a signed request, mapping httpx transport failures to TransportError.

    Args:
        client: The AsyncClient to send with.
        request: Output of ``sign``.
        leg: Handshake leg number, recorded on the error.

    Raises:
        TransportError: On connection failures and timeouts.
    """
    try:
        return await client.request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
        )
    except httpx.TimeoutException as e:
        logger.warning(f"Request {request.method} {_redact(request.url)} timed out")
        raise TransportError(f"Request timed out: {e}", leg=leg) from e
    except httpx.TransportError as e:
        logger.warning(f"Request {request.method} {_redact(request.url)} failed with {e}")
        raise TransportError(f"Request failed: {e}", leg=leg) from e


def _redact(url: str) -> str:
    # signed query strings carry the oauth token and signature
    return url.split("?", 1)[0]
