from __future__ import annotations

from typing import Optional

from .deps import FastAPITokenAuth
from .security import bearer_scheme, extract_token_from_request
from ..common.decoder_factory import create_token_decoder
from ...config.settings import DecoderSettings


def create_fastapi_token_auth(
    *,
    environment: str,
    settings: Optional[DecoderSettings] = None,
    hmac_secret: Optional[str] = None,
) -> FastAPITokenAuth:
    """
    High-level helper for FastAPI apps:

    - Creates a DecodeTokenUseCase from DecoderSettings
    - Wraps it in FastAPITokenAuth, exposing dependencies:

        token_auth.get_claims
        token_auth.get_optional_claims
    """
    decoder = create_token_decoder(settings=settings, hmac_secret=hmac_secret)
    return FastAPITokenAuth(decoder=decoder, environment=environment)


__all__ = [
    "FastAPITokenAuth",
    "bearer_scheme",
    "extract_token_from_request",
    "create_fastapi_token_auth",
]
