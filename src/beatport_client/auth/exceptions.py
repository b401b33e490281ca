"""Exceptions for credential configuration and the OAuth handshake.

Example:
    ```python
    from beatport_client.auth.exceptions import AuthenticationError

    try:
        client = await authenticate(key, secret, username, password)
    except AuthenticationError as e:
        if e.leg == 2:
            print("Wrong Beatport username or password")
    ```
"""

from typing import Any

from beatport_client.errors.exceptions import BeatportError


class ConfigurationError(BeatportError):
    """Raised when consumer credentials are missing or invalid.

    Always detected before any network call is made.
    """

    pass


class CredentialNotFoundError(ConfigurationError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        """Initialize CredentialNotFoundError.

        Args:
            message: Error message describing what credential is missing.
            env_var_name: Optional environment variable name for reference.
        """
        super().__init__(message)
        self.env_var_name = env_var_name


class AuthenticationError(BeatportError):
    """Raised when a leg of the OAuth handshake fails.

    The leg number tells callers which side is at fault:

    - 1: the request-token call was rejected (bad consumer key/secret)
    - 2: the authorize-submit call was rejected (bad username/password)
    - 3: the access-token exchange was rejected (provider-side token mismatch)

    Attributes:
        leg: Failing handshake leg, 1, 2 or 3.
        cause: The underlying exception, or the decoded leg response when an
            expected field was missing.
    """

    def __init__(self, message: str, leg: int, cause: Any = None):
        super().__init__(f"Leg {leg}: {message}")
        self.leg = leg
        self.cause = cause
