from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

from ...config.settings import SharedSecret
from ...domain.constants import VERIFICATION_ORDER, VerificationStep
from ...domain.entities import AttemptResult
from ...domain.exceptions import CredentialUnavailable, TokenInvalid, VerificationError
from ...domain.ports import CredentialSource, SignatureVerifier
from ...domain.value_objects import Environment

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DecodeTokenUseCase:
    """
    Application use case:
    - Try the primary certificate, then the secondary certificate, then the
      shared secret, in that order
    - Return the claims of the first credential that verifies the token

    Every attempt pins its own algorithm (RS256 for certificates, HS256 for
    the shared secret). An unset shared secret is tried as the empty string.
    """

    credentials: CredentialSource
    verifier: SignatureVerifier
    shared_secret: SharedSecret = field(default_factory=SharedSecret)

    def decode(self, token: str, environment: Environment | str) -> Mapping[str, Any]:
        return self.execute(token, environment)

    def execute(self, token: str, environment: Environment | str) -> Mapping[str, Any]:
        """
        Verify a token and return its claims.

        Raises:
            TokenInvalid: no credential verified the token. The cause is the
            error of the last (shared secret) attempt.
        """
        last: AttemptResult | None = None
        for result in self.iter_attempts(token, environment):
            if result.ok:
                return result.claims
            last = result

        logger.info("Token rejected for environment %r", str(environment))
        cause = last.error if last is not None else None
        raise TokenInvalid("Token verification failed") from cause

    def iter_attempts(self, token: str, environment: Environment | str) -> Iterator[AttemptResult]:
        """
        Run the verification chain lazily, yielding one result per attempt.

        Stops after the first successful attempt.
        """
        env = environment if isinstance(environment, Environment) else Environment(environment)

        for step in VERIFICATION_ORDER:
            result = self._attempt(step, token, env)
            yield result
            if result.ok:
                return

    # ------------------------------------------------------------------ #
    # Internal: a single attempt
    # ------------------------------------------------------------------ #

    def _attempt(self, step: VerificationStep, token: str, env: Environment) -> AttemptResult:
        try:
            key = self._key_for(step, env)
            claims = self.verifier.verify(token, key, step.algorithm)
        except CredentialUnavailable as exc:
            logger.debug("%s credential unavailable for %s: %s", step.value, env.family.value, exc)
            return AttemptResult.failure(step, exc)
        except VerificationError as exc:
            logger.debug("%s attempt failed: %s", step.value, exc)
            return AttemptResult.failure(step, exc)

        return AttemptResult.success(step, claims)

    def _key_for(self, step: VerificationStep, env: Environment) -> Any:
        if step.slot is None:
            return self.shared_secret.get()
        return self.credentials.load_public_key(env, step.slot)
