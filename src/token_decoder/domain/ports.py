from __future__ import annotations

from typing import Any, Mapping, Protocol

from .constants import CertificateSlot
from .value_objects import Environment


class TokenDecoder(Protocol):
    """
    Port for decoding a signed token into claims for a given environment.
    """

    def decode(self, token: str, environment: str) -> Mapping[str, Any]:
        """
        Verify the token against every configured credential in turn.

        Raises:
          - TokenInvalid when no credential verifies it
        """
        ...


class CredentialSource(Protocol):
    """
    Port for loading the public key that belongs to (environment, slot).

    Implementations live in the adapters layer (e.g. X.509 files on disk).
    """

    def load_public_key(self, environment: Environment, slot: CertificateSlot) -> Any:
        """
        Raises:
          - CredentialUnavailable
        """
        ...


class SignatureVerifier(Protocol):
    """
    Port wrapping the JWT primitive: one token, one key, one pinned algorithm.
    """

    def verify(self, token: str, key: Any, algorithm: str) -> Mapping[str, Any]:
        """
        Raises:
          - SignatureInvalid
          - ClaimExpired
          - TokenMalformed
        """
        ...
