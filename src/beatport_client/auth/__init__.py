"""OAuth 1.0a authentication for the Beatport API.

This package provides:
- Frozen credential value types passed between handshake legs
- HMAC-SHA1 request signing
- Decoding of the form-encoded handshake responses
- The three-legged username/password handshake
- Credential resolution from the environment (value → env → .env → default)
"""

from beatport_client.auth.credentials import AuthorizedSession, CredentialSet, UserCredentials
from beatport_client.auth.decoder import decode
from beatport_client.auth.exceptions import (
    AuthenticationError,
    ConfigurationError,
    CredentialNotFoundError,
)
from beatport_client.auth.handshake import Handshake, HandshakeState
from beatport_client.auth.resolver import CredentialResolver
from beatport_client.auth.signer import SignedRequest, sign

__all__ = [
    "AuthenticationError",
    "AuthorizedSession",
    "ConfigurationError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "CredentialSet",
    "Handshake",
    "HandshakeState",
    "SignedRequest",
    "UserCredentials",
    "decode",
    "sign",
]
