from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_CERT_DIR = Path(__file__).resolve().parent.parent / "public_key_certs"


class SharedSecret:
    """
    HMAC secret used for the symmetric (HS256) verification attempt.

    Hosts set it once at start-up, but it may be replaced at any time;
    reads and writes are serialised so concurrent decodes always see a
    whole value.
    """

    def __init__(self, value: Optional[str] = None) -> None:
        self._value = value
        self._lock = threading.Lock()

    def set(self, value: Optional[str]) -> None:
        with self._lock:
            self._value = value

    def clear(self) -> None:
        self.set(None)

    def get(self) -> str:
        """Configured secret, or the empty string when none is set."""
        with self._lock:
            return self._value or ""

    @property
    def is_configured(self) -> bool:
        with self._lock:
            return bool(self._value)

    def __repr__(self) -> str:
        state = "configured" if self.is_configured else "unset"
        return f"SharedSecret(<{state}>)"


@dataclass(slots=True)
class DecoderSettings:
    """
    Certificate location + shared-secret settings for the token decoder.

    Host code decides how to construct this (env, config file, etc.).
    """
    cert_dir: Path = DEFAULT_CERT_DIR
    cert_file_prefix: str = ""
    hmac_secret: Optional[str] = field(default=None, repr=False)
    cache_certificates: bool = False

    def __post_init__(self) -> None:
        self.cert_dir = Path(self.cert_dir)

    def shared_secret(self) -> SharedSecret:
        return SharedSecret(self.hmac_secret)
