# src/token_decoder/cli.py

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from .adapters.x509.resolver import CredentialResolver
from .config.env import create_token_decoder_from_env, settings_from_env
from .domain.constants import CertificateSlot
from .domain.exceptions import TokenInvalid


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="token-decoder",
        description="Verify signed tokens against the environment's certificates",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    decode = sub.add_parser("decode", help="Verify a token and print its claims.")
    decode.add_argument("token", help="Signed token (JWT).")
    decode.add_argument(
        "--environment",
        "-e",
        default="production",
        help="Deployment environment; test/qa/development use the qa certificates "
             "(default: production).",
    )
    decode.add_argument(
        "--secret",
        help="HMAC secret for HS256 tokens (defaults from env TOKEN_DECODER_HMAC_SECRET).",
    )

    cert_path = sub.add_parser("cert-path", help="Print the certificate file an environment uses.")
    cert_path.add_argument("--environment", "-e", default="production")
    cert_path.add_argument(
        "--secondary",
        action="store_true",
        help="Resolve the secondary certificate instead of the primary one.",
    )

    return parser.parse_args(args=argv)


def _decode(args: argparse.Namespace) -> dict[str, Any]:
    decoder = create_token_decoder_from_env(hmac_secret=args.secret)
    claims = decoder.decode(args.token, args.environment)
    return {"claims": dict(claims)}


def _cert_path(args: argparse.Namespace) -> dict[str, Any]:
    settings = settings_from_env()
    resolver = CredentialResolver(cert_dir=settings.cert_dir, file_prefix=settings.cert_file_prefix)
    slot = CertificateSlot.SECONDARY if args.secondary else CertificateSlot.PRIMARY
    return {"path": str(resolver.resolve_certificate_path(args.environment, slot))}


def _emit(payload: dict[str, Any]) -> None:
    json.dump(payload, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    handler = _decode if args.command == "decode" else _cert_path

    try:
        summary = handler(args)
    except TokenInvalid as exc:
        _emit({"ok": False, "error": str(exc)})
        raise SystemExit(1) from exc

    _emit({"ok": True, **summary})


if __name__ == "__main__":
    main()
