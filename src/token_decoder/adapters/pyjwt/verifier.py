from typing import Any, Mapping

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    ImmatureSignatureError,
    InvalidSignatureError,
    PyJWTError,
)

from ...domain.exceptions import ClaimExpired, SignatureInvalid, TokenMalformed
from ...domain.ports import SignatureVerifier


class PyJWTSignatureVerifier(SignatureVerifier):
    """
    Adapter implementing SignatureVerifier port using PyJWT.

    The algorithm is always pinned by the caller; whatever `alg` the token
    header claims is only accepted if it equals it. Timestamps (`exp`,
    `nbf`, `iat`) are checked, audience is not.
    """

    def __init__(self, leeway: float = 0) -> None:
        self._leeway = leeway

    def verify(self, token: str, key: Any, algorithm: str) -> Mapping[str, Any]:
        try:
            return jwt.decode(
                token,
                key,
                algorithms=[algorithm],
                options={"verify_aud": False},
                leeway=self._leeway,
            )
        except (ExpiredSignatureError, ImmatureSignatureError) as exc:
            raise ClaimExpired(f"Token outside its validity window: {exc}") from exc
        except InvalidSignatureError as exc:
            raise SignatureInvalid("Signature verification failed") from exc
        except DecodeError as exc:
            raise TokenMalformed(f"Malformed token: {exc}") from exc
        except PyJWTError as exc:
            # algorithm mismatch, unusable key, bad claim types
            raise SignatureInvalid(f"Invalid token: {exc}") from exc
