"""Admin login use case."""

import logfire
from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import AdminView, ApiModel
from skillswap.domain.service import AdminService, JWTService
from skillswap.domain.value import EmailAddress


class AdminLoginRequest(BaseModel):
    """Admin login request."""

    email: EmailAddress
    password: str = Field(min_length=1)


class AdminAuthResponse(ApiModel):
    token: str
    admin: AdminView


class AdminLoginUseCase(BaseUseCase[AdminLoginRequest, AdminAuthResponse]):
    """Use case for admin login with lockout after repeated failures."""

    def __init__(self, admin_service: AdminService, jwt_service: JWTService) -> None:
        """Initialize admin login use case.

        Args:
            admin_service: Admin domain service (credentials and lockout)
            jwt_service: JWT service for the admin session token
        """
        self.admin_service = admin_service
        self.jwt_service = jwt_service

    async def execute(self, request: AdminLoginRequest) -> AdminAuthResponse:
        """Execute admin login flow.

        Raises:
            AuthenticationError: If the credentials are wrong
            AccountLockedError: If the admin is locked out
            NotAuthorizedError: If the admin is deactivated
        """
        with logfire.span("admin_login.execute", email=request.email.root):
            admin = await self.admin_service.authenticate(request.email, request.password)
            token = self.jwt_service.create_token(str(admin.id), admin.name, "admin")
            return AdminAuthResponse(token=token, admin=AdminView.from_admin(admin))
