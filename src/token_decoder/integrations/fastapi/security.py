from __future__ import annotations

from typing import Iterator, Optional

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Plug into routes for the OpenAPI "HTTPBearer" security scheme
bearer_scheme = HTTPBearer(auto_error=False)

DEFAULT_COOKIE_NAME = "access_token"
BEARER_PREFIX = "Bearer "


def _candidate_tokens(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    cookie_name: str,
) -> Iterator[str]:
    if credentials is not None:
        yield credentials.credentials or ""

    header = request.headers.get("Authorization") or ""
    if header.startswith(BEARER_PREFIX):
        yield header[len(BEARER_PREFIX):]

    yield request.cookies.get(cookie_name) or ""


def extract_token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
    cookie_name: str = DEFAULT_COOKIE_NAME,
) -> str:
    """
    Return the signed token sent with the request.

    Looked up, in order, in the HTTPBearer credentials, the raw
    `Authorization: Bearer` header and the `cookie_name` cookie.

    Raises HTTPException(401) when none of them carries a token.
    """
    for candidate in _candidate_tokens(request, credentials, cookie_name):
        token = candidate.strip()
        if token:
            return token

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )
