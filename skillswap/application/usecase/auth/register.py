"""Register use case."""

import logfire
from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ApiModel, PrivateProfileView
from skillswap.domain.service import AuthService, JWTService
from skillswap.domain.value import EmailAddress


class RegisterRequest(BaseModel):
    """Register request."""

    name: str = Field(min_length=1, max_length=50)
    email: EmailAddress
    password: str = Field(min_length=6)


class AuthResponse(ApiModel):
    """Token and profile returned after register or login."""

    token: str
    user: PrivateProfileView


class RegisterUseCase(BaseUseCase[RegisterRequest, AuthResponse]):
    """Use case for signing up with email and password."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Account authentication service
            jwt_service: JWT service for the session token
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Create the account and issue a session token.

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("register.execute", email=request.email.root):
            account = await self.auth_service.register(
                name=request.name.strip(),
                email=request.email,
                password=request.password,
            )
            token = self.jwt_service.create_token(
                str(account.id), account.name, "account"
            )
            return AuthResponse(
                token=token, user=PrivateProfileView.from_account(account)
            )
