from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ...domain.constants import CertificateSlot
from ...domain.value_objects import Environment, certificate_file_name


@dataclass(frozen=True, slots=True)
class CredentialResolver:
    """
    Maps (environment, slot) to a certificate file under `cert_dir`.

    Pure: nothing is read here, a missing file only shows up when the
    certificate store tries to load it.
    """

    cert_dir: Path
    file_prefix: str = ""

    def resolve_certificate_path(
            self,
            environment: Environment | str,
            slot: CertificateSlot = CertificateSlot.PRIMARY,
    ) -> Path:
        name = certificate_file_name(environment, slot, prefix=self.file_prefix)
        return Path(self.cert_dir) / name
