"""
token_decoder

Verifies signed tokens (JWT) for a deployment environment by trying, in
order, the environment's primary certificate, its secondary certificate
and finally a shared HMAC secret.
"""

__version__ = "0.1.0"

from .domain.constants import (
    CertificateFamily,
    CertificateSlot,
    VerificationStep,
    RS256,
    HS256,
)
from .domain.entities import AttemptResult
from .domain.exceptions import (
    TokenDecoderError,
    CredentialUnavailable,
    VerificationError,
    SignatureInvalid,
    ClaimExpired,
    TokenMalformed,
    TokenInvalid,
)
from .domain.value_objects import Environment, certificate_file_name
from .domain.ports import TokenDecoder, CredentialSource, SignatureVerifier

from .application.use_cases.decode_token import DecodeTokenUseCase

from .adapters.x509.resolver import CredentialResolver
from .adapters.x509.certificate_store import X509CertificateStore
from .adapters.pyjwt.verifier import PyJWTSignatureVerifier

from .config.settings import DecoderSettings, SharedSecret
from .integrations.common.decoder_factory import create_token_decoder

__all__ = [
    "__version__",
    # domain core
    "CertificateFamily",
    "CertificateSlot",
    "VerificationStep",
    "RS256",
    "HS256",
    "AttemptResult",
    "Environment",
    "certificate_file_name",
    "TokenDecoder",
    "CredentialSource",
    "SignatureVerifier",
    # exceptions
    "TokenDecoderError",
    "CredentialUnavailable",
    "VerificationError",
    "SignatureInvalid",
    "ClaimExpired",
    "TokenMalformed",
    "TokenInvalid",
    # use cases
    "DecodeTokenUseCase",
    # adapters
    "CredentialResolver",
    "X509CertificateStore",
    "PyJWTSignatureVerifier",
    # wiring
    "DecoderSettings",
    "SharedSecret",
    "create_token_decoder",
]
