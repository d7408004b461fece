"""JWT token domain service."""

import logfire

from skillswap.config import AuthSettings
from skillswap.util.jwt import PrincipalKind, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, subject: str, name: str, kind: PrincipalKind) -> str:
        """Create JWT token for an account or admin."""
        with logfire.span("jwt_service.create_token", subject=subject, kind=kind):
            token = create_token(subject, name, kind, self.auth_settings)
            logfire.info("JWT token created", subject=subject, kind=kind)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_principal(
        self, token: str | None, kind: PrincipalKind
    ) -> TokenPayload | None:
        """Decode a token of the given principal kind without raising.

        Returns:
            Payload if the token is present, valid and of ``kind``, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except Exception as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
        return payload if payload.kind == kind else None
