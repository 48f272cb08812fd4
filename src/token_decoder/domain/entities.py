from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .constants import VerificationStep


@dataclass(frozen=True, slots=True)
class AttemptResult:
    """
    Outcome of one step of the verification chain.

    Exactly one of `claims` / `error` is set.
    """
    step: VerificationStep
    claims: Optional[Mapping[str, Any]] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def algorithm(self) -> str:
        return self.step.algorithm

    @classmethod
    def success(cls, step: VerificationStep, claims: Mapping[str, Any]) -> "AttemptResult":
        return cls(step=step, claims=claims)

    @classmethod
    def failure(cls, step: VerificationStep, error: Exception) -> "AttemptResult":
        return cls(step=step, error=error)
