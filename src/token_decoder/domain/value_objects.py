# src/token_decoder/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    CERTIFICATE_EXTENSION,
    QA_ENVIRONMENTS,
    SECONDARY_SUFFIX,
    CertificateFamily,
    CertificateSlot,
)


@dataclass(frozen=True, slots=True)
class Environment:
    """
    Deployment environment a token is being verified for.

    Only "test", "qa" and "development" (exact, case-sensitive) map to the
    qa certificates. Every other name, including the empty string, is
    treated as production.
    """
    name: str

    @property
    def family(self) -> CertificateFamily:
        if self.name in QA_ENVIRONMENTS:
            return CertificateFamily.QA
        return CertificateFamily.PRODUCTION

    @property
    def is_production(self) -> bool:
        return self.family is CertificateFamily.PRODUCTION

    def __str__(self) -> str:
        return self.name


def certificate_file_name(
        environment: Environment | str,
        slot: CertificateSlot,
        prefix: str = "",
) -> str:
    """
    File name of the certificate for an environment and slot.

    >>> certificate_file_name("qa", CertificateSlot.SECONDARY)
    'qa_secondary.cer'
    """
    if isinstance(environment, str):
        environment = Environment(environment)

    suffix = SECONDARY_SUFFIX if slot is CertificateSlot.SECONDARY else ""
    return f"{prefix}{environment.family.value}{suffix}{CERTIFICATE_EXTENSION}"
