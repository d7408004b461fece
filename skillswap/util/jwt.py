"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Literal

import jwt
from pydantic import BaseModel

from skillswap.config import AuthSettings

PrincipalKind = Literal["account", "admin"]


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # Account or admin ID
    name: str
    kind: PrincipalKind
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    subject: str, name: str, kind: PrincipalKind, settings: AuthSettings
) -> str:
    """Create a JWT token for an account or admin.

    Args:
        subject: Principal ID
        name: Display name carried for notification messages
        kind: Principal type
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": subject,
        "name": name,
        "kind": kind,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
