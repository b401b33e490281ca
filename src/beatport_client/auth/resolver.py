"""Resolve Beatport credentials from the environment.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv)
4. Default value

Example:
    ```python
    from beatport_client.auth.resolver import CredentialResolver

    resolver = CredentialResolver()
    user_credentials = resolver.resolve_user_credentials()

    # Explicit values still win over the environment
    user_credentials = resolver.resolve_user_credentials(username="dj-someone")
    ```

Security Considerations:
    - Credentials are never logged in full (masked with ***)
    - Only source information is logged (env var name, default, etc.)
    - Thread-safe dotenv loading with lock
"""

import logging
import os
from threading import Lock

from dotenv import load_dotenv

from beatport_client.auth.credentials import UserCredentials
from beatport_client.auth.exceptions import CredentialNotFoundError

logger = logging.getLogger(__name__)

CONSUMER_KEY_ENV = "BEATPORT_CONSUMER_KEY"
CONSUMER_SECRET_ENV = "BEATPORT_CONSUMER_SECRET"
USERNAME_ENV = "BEATPORT_USERNAME"
PASSWORD_ENV = "BEATPORT_PASSWORD"


class CredentialResolver:
    """Resolve credentials from multiple sources with priority ordering.

    Explicit values take precedence over environment variables, which take
    precedence over .env file values, which take precedence over defaults.
    Values from the .env file never override variables already present in
    the process environment.

    Attributes:
        _dotenv_loaded: Whether .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, searches parent directories
                for .env file (default behavior of python-dotenv).
            load_dotenv: Whether to load .env file. Set to False to skip
                .env file loading (useful for testing).
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            # Double-check pattern for thread safety
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single credential.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check.
            default: Default value if not found elsewhere.
            required: If True, raises CredentialNotFoundError when the
                credential cannot be resolved.
            mask_in_logs: If True (default), masks credential values
                in log messages.

        Returns:
            Resolved credential value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required=True and credential not found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and not result:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_user_credentials(
        self,
        *,
        consumer_key: str | None = None,
        consumer_secret: str | None = None,
        username: str | None = None,
        password: str | None = None,
    ) -> UserCredentials:
        """Resolve the four values the handshake needs.

        Raises:
            CredentialNotFoundError: If any of them is missing or empty.
        """
        return UserCredentials(
            consumer_key=self.resolve(
                value=consumer_key, env_var_name=CONSUMER_KEY_ENV, required=True, mask_in_logs=False
            ),
            consumer_secret=self.resolve(value=consumer_secret, env_var_name=CONSUMER_SECRET_ENV, required=True),
            username=self.resolve(value=username, env_var_name=USERNAME_ENV, required=True, mask_in_logs=False),
            password=self.resolve(value=password, env_var_name=PASSWORD_ENV, required=True),
        )
