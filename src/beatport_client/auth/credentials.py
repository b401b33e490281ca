"""Credential value types passed between handshake legs.

Every type here is frozen. The handshake builds a fresh ``CredentialSet``
for each leg instead of updating one in place.
"""

from dataclasses import dataclass, replace


def _mask(value: str) -> str:
    return "***" if value else "''"


@dataclass(frozen=True)
class CredentialSet:
    """OAuth 1.0a signing credentials.

    ``token`` and ``token_secret`` are empty until the provider issues them.
    ``consumer_key`` and ``consumer_secret`` stay the same for the whole
    handshake and for every catalog call after it.
    """

    consumer_key: str
    consumer_secret: str
    token: str = ""
    token_secret: str = ""

    @property
    def has_token(self) -> bool:
        return bool(self.token)

    def with_token(self, token: str, token_secret: str = "") -> "CredentialSet":
        """Return a copy with the same consumer pair and a new token pair."""
        return replace(self, token=token, token_secret=token_secret)

    def __repr__(self) -> str:
        return (
            f"CredentialSet(consumer_key={self.consumer_key!r}, "
            f"consumer_secret={_mask(self.consumer_secret)}, "
            f"token={self.token!r}, token_secret={_mask(self.token_secret)})"
        )


@dataclass(frozen=True)
class UserCredentials:
    """Everything needed to run the handshake on a user's behalf."""

    consumer_key: str
    consumer_secret: str
    username: str
    password: str

    def consumer(self) -> CredentialSet:
        """Consumer-only credential set used to sign legs 1 and 2."""
        return CredentialSet(consumer_key=self.consumer_key, consumer_secret=self.consumer_secret)

    def __repr__(self) -> str:
        return (
            f"UserCredentials(consumer_key={self.consumer_key!r}, "
            f"consumer_secret={_mask(self.consumer_secret)}, "
            f"username={self.username!r}, password={_mask(self.password)})"
        )


@dataclass(frozen=True)
class AuthorizedSession:
    """Final access credentials produced by a successful handshake.

    Read-only after construction, so one session can sign any number of
    concurrent catalog calls.
    """

    credentials: CredentialSet

    @property
    def token(self) -> str:
        return self.credentials.token

    @property
    def token_secret(self) -> str:
        return self.credentials.token_secret
