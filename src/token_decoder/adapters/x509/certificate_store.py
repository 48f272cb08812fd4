import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Tuple

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from ...domain.constants import CertificateSlot
from ...domain.exceptions import CredentialUnavailable
from ...domain.ports import CredentialSource
from ...domain.value_objects import Environment
from .resolver import CredentialResolver

logger = logging.getLogger(__name__)

_PEM_MARKER = b"-----BEGIN"


def parse_certificate(data: bytes) -> x509.Certificate:
    """
    Parse a PEM or DER encoded X.509 certificate.

    Raises ValueError when the bytes are not a certificate.
    """
    if data.lstrip().startswith(_PEM_MARKER):
        return x509.load_pem_x509_certificate(data)
    return x509.load_der_x509_certificate(data)


class X509CertificateStore(CredentialSource):
    """
    Adapter implementing CredentialSource on top of certificate files.

    Infrastructure layer:
    - Knows where certificates live (through CredentialResolver).
    - Knows how to parse them and pull out the RSA public key.

    With `cache=True` parsed keys are kept per file and reloaded whenever
    the file's mtime or size changes. Without it every call reads the file.
    """

    def __init__(self, resolver: CredentialResolver, cache: bool = False) -> None:
        self._resolver = resolver
        self._cache_enabled = cache

        self._cache: Dict[Path, Tuple[Tuple[int, int], RSAPublicKey]] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def load_public_key(self, environment: Environment, slot: CertificateSlot) -> RSAPublicKey:
        path = self._resolver.resolve_certificate_path(environment, slot)

        try:
            stat = path.stat()
        except OSError as exc:
            raise CredentialUnavailable(f"Certificate not found: {path}") from exc

        fingerprint = (stat.st_mtime_ns, stat.st_size)
        if self._cache_enabled:
            cached = self._cached_key(path, fingerprint)
            if cached is not None:
                return cached

        public_key = self._read_public_key(path)

        if self._cache_enabled:
            with self._lock:
                self._cache[path] = (fingerprint, public_key)

        return public_key

    # ------------------------------------------------------------------ #
    # Cache helpers
    # ------------------------------------------------------------------ #

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def _cached_key(self, path: Path, fingerprint: Tuple[int, int]) -> Optional[RSAPublicKey]:
        with self._lock:
            entry = self._cache.get(path)
            if entry is None:
                return None
            if entry[0] != fingerprint:
                logger.debug("Certificate %s changed on disk, reloading", path)
                del self._cache[path]
                return None
            return entry[1]

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _read_public_key(self, path: Path) -> RSAPublicKey:
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise CredentialUnavailable(f"Certificate not readable: {path}") from exc

        try:
            certificate = parse_certificate(data)
            public_key = certificate.public_key()
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise CredentialUnavailable(f"Certificate not parsable: {path}") from exc

        if not isinstance(public_key, RSAPublicKey):
            raise CredentialUnavailable(f"Certificate does not carry an RSA key: {path}")

        return public_key
