"""Login use case."""

import logfire
from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import PrivateProfileView
from skillswap.domain.service import AuthService, JWTService
from skillswap.domain.value import EmailAddress

from .register import AuthResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: EmailAddress
    password: str = Field(min_length=1)


class LoginUseCase(BaseUseCase[LoginRequest, AuthResponse]):
    """Use case for logging in with email and password."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Steps:
        1. Check email and password
        2. Refuse banned accounts
        3. Issue a session token

        Raises:
            AuthenticationError: If the credentials are wrong
            NotAuthorizedError: If the account is banned
        """
        with logfire.span("login.execute", email=request.email.root):
            account = await self.auth_service.authenticate(
                request.email, request.password
            )
            token = self.jwt_service.create_token(
                str(account.id), account.name, "account"
            )
            return AuthResponse(
                token=token, user=PrivateProfileView.from_account(account)
            )
