from __future__ import annotations

from pathlib import Path
from typing import Optional

from ...adapters.pyjwt.verifier import PyJWTSignatureVerifier
from ...adapters.x509.certificate_store import X509CertificateStore
from ...adapters.x509.resolver import CredentialResolver
from ...application.use_cases.decode_token import DecodeTokenUseCase
from ...config.settings import DecoderSettings, SharedSecret


def create_token_decoder(
        *,
        settings: Optional[DecoderSettings] = None,
        cert_dir: Optional[Path | str] = None,
        hmac_secret: Optional[str] = None,
        shared_secret: Optional[SharedSecret] = None,
) -> DecodeTokenUseCase:
    """
    High-level factory: DecoderSettings -> DecodeTokenUseCase.

    - builds a CredentialResolver + X509CertificateStore for the cert dir
    - builds a PyJWTSignatureVerifier
    - wires them together with the shared secret

    Keyword overrides win over `settings`. Pass `shared_secret` to share one
    mutable secret holder between several decoders.
    """
    settings = settings or DecoderSettings()

    resolver = CredentialResolver(
        cert_dir=Path(cert_dir) if cert_dir is not None else settings.cert_dir,
        file_prefix=settings.cert_file_prefix,
    )
    store = X509CertificateStore(resolver, cache=settings.cache_certificates)

    if shared_secret is None:
        shared_secret = SharedSecret(hmac_secret if hmac_secret is not None else settings.hmac_secret)

    return DecodeTokenUseCase(
        credentials=store,
        verifier=PyJWTSignatureVerifier(),
        shared_secret=shared_secret,
    )
