# tests/conftest.py
import datetime
from pathlib import Path

import jwt
import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from token_decoder.domain.constants import CertificateFamily, CertificateSlot
from token_decoder.domain.value_objects import certificate_file_name
from token_decoder.integrations.common.decoder_factory import create_token_decoder

HMAC_SECRET = (
    "a2a06bd8c5750e77a884cd823e6a79a40ca24593c55a2c1bae0e521ec3bec10a"
    "9a837c101a8d7b3fb3c94a5954e1a2e68045c33890291888203b53f6f0b87474"
)

# one environment name per certificate family
FAMILY_ENVIRONMENT = {
    CertificateFamily.QA: "qa",
    CertificateFamily.PRODUCTION: "production",
}


def make_certificate(private_key, common_name: str) -> x509.Certificate:
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.datetime.now(datetime.timezone.utc)
    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=365))
        .sign(private_key, hashes.SHA256())
    )


def write_certificate(path: Path, certificate: x509.Certificate, encoding=serialization.Encoding.PEM) -> Path:
    path.write_bytes(certificate.public_bytes(encoding))
    return path


@pytest.fixture(scope="session")
def private_keys():
    """RSA signing keys for every (family, slot) pair."""
    return {
        (family, slot): rsa.generate_private_key(public_exponent=65537, key_size=2048)
        for family in CertificateFamily
        for slot in CertificateSlot
    }


@pytest.fixture(scope="session")
def cert_dir(tmp_path_factory, private_keys) -> Path:
    """
    Certificate root with all four files.

    production_secondary.cer is DER encoded, the others PEM.
    """
    root = tmp_path_factory.mktemp("public_key_certs")
    for (family, slot), key in private_keys.items():
        environment = FAMILY_ENVIRONMENT[family]
        encoding = serialization.Encoding.PEM
        if family is CertificateFamily.PRODUCTION and slot is CertificateSlot.SECONDARY:
            encoding = serialization.Encoding.DER
        write_certificate(
            root / certificate_file_name(environment, slot),
            make_certificate(key, f"{family.value}-{slot.value}"),
            encoding,
        )
    return root


@pytest.fixture
def sign(private_keys):
    """sign(family, slot, claims) -> RS256 token."""

    def _sign(family: CertificateFamily, slot: CertificateSlot, claims: dict, **headers) -> str:
        return jwt.encode(claims, private_keys[(family, slot)], algorithm="RS256", headers=headers or None)

    return _sign


@pytest.fixture
def decoder(cert_dir):
    return create_token_decoder(cert_dir=cert_dir)
