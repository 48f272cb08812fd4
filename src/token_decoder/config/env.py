from __future__ import annotations

import os
from typing import TYPE_CHECKING, Optional

from .settings import DEFAULT_CERT_DIR, DecoderSettings

if TYPE_CHECKING:
    from ..application.use_cases.decode_token import DecodeTokenUseCase

ENV_CERT_DIR = "TOKEN_DECODER_CERT_DIR"
ENV_CERT_PREFIX = "TOKEN_DECODER_CERT_PREFIX"
ENV_HMAC_SECRET = "TOKEN_DECODER_HMAC_SECRET"
ENV_CACHE_CERTS = "TOKEN_DECODER_CACHE_CERTS"


def settings_from_env() -> DecoderSettings:
    def _bool(key: str, default: bool = False) -> bool:
        raw = os.getenv(key)
        if raw is None:
            return default
        return str(raw).strip().lower() in {"1", "true", "yes", "on"}

    cert_dir = os.getenv(ENV_CERT_DIR) or DEFAULT_CERT_DIR

    return DecoderSettings(
        cert_dir=cert_dir,
        cert_file_prefix=os.getenv(ENV_CERT_PREFIX, ""),
        hmac_secret=os.getenv(ENV_HMAC_SECRET) or None,
        cache_certificates=_bool(ENV_CACHE_CERTS, False),
    )


def create_token_decoder_from_env(*, hmac_secret: Optional[str] = None) -> DecodeTokenUseCase:
    """Convenience wrapper: env-configured settings -> DecodeTokenUseCase."""
    from ..integrations.common.decoder_factory import create_token_decoder

    settings = settings_from_env()
    if hmac_secret is not None:
        settings.hmac_secret = hmac_secret
    return create_token_decoder(settings=settings)
