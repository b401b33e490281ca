"""Transport layer for the Beatport client.

Modules:
    http: AsyncClient factory and signed-request sending

Example:
    ```python
    import httpx

    from beatport_client.transport import create_http_client

    client = create_http_client(timeout=10.0)
    ```
"""

from beatport_client.transport.http import DEFAULT_TIMEOUT, OAUTH_URI, create_http_client, send

__all__ = ["DEFAULT_TIMEOUT", "OAUTH_URI", "create_http_client", "send"]
