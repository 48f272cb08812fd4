# tests/test_verifier.py
import time

import jwt
import pytest

from token_decoder.adapters.pyjwt.verifier import PyJWTSignatureVerifier
from token_decoder.domain.constants import CertificateFamily, CertificateSlot
from token_decoder.domain.exceptions import (
    ClaimExpired,
    SignatureInvalid,
    TokenMalformed,
    VerificationError,
)

from .conftest import HMAC_SECRET

QA_PRIMARY = (CertificateFamily.QA, CertificateSlot.PRIMARY)


@pytest.fixture
def verifier():
    return PyJWTSignatureVerifier()


@pytest.fixture
def qa_public_key(private_keys):
    return private_keys[QA_PRIMARY].public_key()


def test_verify_rs256(verifier, sign, qa_public_key):
    token = sign(*QA_PRIMARY, {"app_id": "evo", "aud": "https://identity.example.org/resources"})

    claims = verifier.verify(token, qa_public_key, "RS256")

    # audience is carried through, not validated
    assert claims == {"app_id": "evo", "aud": "https://identity.example.org/resources"}


def test_verify_hs256(verifier):
    token = jwt.encode({"app_id": "evo"}, HMAC_SECRET, algorithm="HS256")
    assert verifier.verify(token, HMAC_SECRET, "HS256") == {"app_id": "evo"}


def test_wrong_key(verifier, sign, private_keys):
    token = sign(*QA_PRIMARY, {"app_id": "evo"})
    other = private_keys[(CertificateFamily.QA, CertificateSlot.SECONDARY)].public_key()

    with pytest.raises(SignatureInvalid):
        verifier.verify(token, other, "RS256")


def test_wrong_hmac_secret(verifier):
    token = jwt.encode({"app_id": "evo"}, HMAC_SECRET, algorithm="HS256")

    with pytest.raises(SignatureInvalid):
        verifier.verify(token, "another-secret-of-reasonable-length-0123456789", "HS256")


def test_algorithm_is_pinned(verifier, sign, qa_public_key):
    rs_token = sign(*QA_PRIMARY, {"app_id": "evo"})
    hs_token = jwt.encode({"app_id": "evo"}, HMAC_SECRET, algorithm="HS256")

    # header says RS256, caller pins HS256
    with pytest.raises(SignatureInvalid):
        verifier.verify(rs_token, HMAC_SECRET, "HS256")
    # header says HS256, caller pins RS256
    with pytest.raises(SignatureInvalid):
        verifier.verify(hs_token, qa_public_key, "RS256")


def test_expired_token(verifier, sign, qa_public_key):
    token = sign(*QA_PRIMARY, {"app_id": "evo", "exp": int(time.time()) - 60})

    with pytest.raises(ClaimExpired):
        verifier.verify(token, qa_public_key, "RS256")


def test_not_yet_valid_token(verifier, sign, qa_public_key):
    token = sign(*QA_PRIMARY, {"app_id": "evo", "nbf": int(time.time()) + 3600})

    with pytest.raises(ClaimExpired):
        verifier.verify(token, qa_public_key, "RS256")


def test_leeway(sign, qa_public_key):
    token = sign(*QA_PRIMARY, {"app_id": "evo", "exp": int(time.time()) - 5})

    claims = PyJWTSignatureVerifier(leeway=60).verify(token, qa_public_key, "RS256")
    assert claims["app_id"] == "evo"


@pytest.mark.parametrize(
    "token",
    [
        "",
        "not-a-token",
        "only.two",
        "four.segments.are.wrong",
        "!!!.###.$$$",
    ],
)
def test_malformed_token(verifier, qa_public_key, token):
    with pytest.raises(TokenMalformed):
        verifier.verify(token, qa_public_key, "RS256")


def test_corrupt_signature(verifier, sign, qa_public_key):
    header, payload, _ = sign(*QA_PRIMARY, {"app_id": "evo"}).split(".")
    token = f"{header}.{payload}.{'A' * 342}"

    with pytest.raises(VerificationError):
        verifier.verify(token, qa_public_key, "RS256")
