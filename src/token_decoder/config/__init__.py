"""
token_decoder.config

- DecoderSettings: where certificates live, optional shared secret.
- SharedSecret: lock-guarded holder for the HS256 secret.
- settings_from_env / create_token_decoder_from_env:
    convenience wrappers for env-driven hosts and the CLI.
"""

from __future__ import annotations

from .settings import DEFAULT_CERT_DIR, DecoderSettings, SharedSecret
from .env import settings_from_env, create_token_decoder_from_env

__all__ = [
    "DEFAULT_CERT_DIR",
    "DecoderSettings",
    "SharedSecret",
    "settings_from_env",
    "create_token_decoder_from_env",
]
