from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from .security import DEFAULT_COOKIE_NAME, bearer_scheme, extract_token_from_request
from ...domain.exceptions import TokenInvalid
from ...domain.ports import TokenDecoder


@dataclass(slots=True)
class FastAPITokenAuth:
    """
    FastAPI integration for token_decoder.

    `environment` is fixed per app (the deployment it runs in) and decides
    which certificate family verifies incoming tokens.
    """

    decoder: TokenDecoder
    environment: str
    cookie_name: str = DEFAULT_COOKIE_NAME

    async def get_claims(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Mapping[str, Any]:
        """Dependency: require a verified token."""
        token = extract_token_from_request(request, credentials, self.cookie_name)
        try:
            return self.decoder.decode(token, self.environment)
        except TokenInvalid as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid token",
            ) from exc

    async def get_optional_claims(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Mapping[str, Any] | None:
        """Dependency: verified claims if a valid token was sent, else None."""
        try:
            token = extract_token_from_request(request, credentials, self.cookie_name)
        except HTTPException:
            return None

        try:
            return self.decoder.decode(token, self.environment)
        except TokenInvalid:
            return None
