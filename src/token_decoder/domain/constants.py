from enum import Enum

RS256 = "RS256"
HS256 = "HS256"

CERTIFICATE_EXTENSION = ".cer"
SECONDARY_SUFFIX = "_secondary"

# Literal, case-sensitive environment names served by the qa certificates.
QA_ENVIRONMENTS = frozenset({"test", "qa", "development"})


class CertificateFamily(Enum):
    QA = "qa"
    PRODUCTION = "production"


class CertificateSlot(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


class VerificationStep(Enum):
    PRIMARY_CERTIFICATE = "primary_certificate"
    SECONDARY_CERTIFICATE = "secondary_certificate"
    SHARED_SECRET = "shared_secret"

    @property
    def algorithm(self) -> str:
        if self is VerificationStep.SHARED_SECRET:
            return HS256
        return RS256

    @property
    def slot(self) -> CertificateSlot | None:
        if self is VerificationStep.PRIMARY_CERTIFICATE:
            return CertificateSlot.PRIMARY
        if self is VerificationStep.SECONDARY_CERTIFICATE:
            return CertificateSlot.SECONDARY
        return None


# Order in which credentials are tried. Never reorder.
VERIFICATION_ORDER = (
    VerificationStep.PRIMARY_CERTIFICATE,
    VerificationStep.SECONDARY_CERTIFICATE,
    VerificationStep.SHARED_SECRET,
)
