"""Request authentication helpers.

Tokens are read from the ``auth_token`` cookie, falling back to an
``Authorization: Bearer`` header.
"""

from typing import Annotated
from uuid import UUID

from fastapi import Cookie, Depends, Header

from skillswap.domain.error import AuthenticationError
from skillswap.domain.service import JWTService


def read_token(
    auth_token: Annotated[str | None, Cookie()] = None,
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    """Pull the raw token from the request, if one was sent."""
    if auth_token:
        return auth_token
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return None


AuthToken = Annotated[str | None, Depends(read_token)]


def optional_account_id(jwt_service: JWTService, token: str | None) -> str | None:
    """Account ID of a valid account token, or None for anonymous callers."""
    payload = jwt_service.get_principal(token, "account")
    return str(UUID(payload.sub)) if payload else None


def require_account_id(jwt_service: JWTService, token: str | None) -> str:
    """Account ID of the caller.

    Raises:
        AuthenticationError: If no valid account token was sent
    """
    if not token:
        raise AuthenticationError("Not authorized, no token")
    account_id = optional_account_id(jwt_service, token)
    if account_id is None:
        raise AuthenticationError("Not authorized, token failed")
    return account_id


def require_admin_id(jwt_service: JWTService, token: str | None) -> str:
    """Admin ID of the caller.

    Raises:
        AuthenticationError: If no valid admin token was sent
    """
    if not token:
        raise AuthenticationError("Not authorized, no token")
    payload = jwt_service.get_principal(token, "admin")
    if payload is None:
        raise AuthenticationError("Not authorized, admin token required")
    return str(UUID(payload.sub))
