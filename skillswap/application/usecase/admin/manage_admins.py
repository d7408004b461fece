"""Admin account management use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import AdminView, ApiModel
from skillswap.domain.service import AdminService
from skillswap.domain.value import AdminId, AdminRole, EmailAddress, Permission

from .dashboard import AdminRequest


class AdminListResponse(ApiModel):
    admins: list[AdminView]


class CreateAdminRequest(BaseModel):
    """Create admin request; permissions default to the role's set."""

    admin_id: str
    name: str = Field(min_length=1, max_length=50)
    email: EmailAddress
    password: str = Field(min_length=6)
    role: AdminRole = AdminRole.MODERATOR
    permissions: list[Permission] | None = None


class UpdateAdminRequest(BaseModel):
    admin_id: str
    target_id: str
    name: str | None = Field(default=None, min_length=1, max_length=50)
    role: AdminRole | None = None
    permissions: list[Permission] | None = None
    is_active: bool | None = None


class DeleteAdminRequest(BaseModel):
    admin_id: str
    target_id: str


class ListAdminsUseCase(BaseUseCase[AdminRequest, AdminListResponse]):
    def __init__(self, admin_service: AdminService) -> None:
        self.admin_service = admin_service

    async def execute(self, request: AdminRequest) -> AdminListResponse:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_ADMINS
        )
        admins = await self.admin_service.list_admins()
        return AdminListResponse(admins=[AdminView.from_admin(a) for a in admins])


class CreateAdminUseCase(BaseUseCase[CreateAdminRequest, AdminView]):
    """Use case for adding an admin or moderator.

    Super admins are only created by the bootstrap script.
    """

    def __init__(self, admin_service: AdminService) -> None:
        self.admin_service = admin_service

    async def execute(self, request: CreateAdminRequest) -> AdminView:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_ADMINS
        )
        admin = await self.admin_service.create_admin(
            name=request.name.strip(),
            email=request.email,
            password=request.password,
            role=request.role,
            permissions=set(request.permissions)
            if request.permissions is not None
            else None,
        )
        return AdminView.from_admin(admin)


class UpdateAdminUseCase(BaseUseCase[UpdateAdminRequest, AdminView]):
    def __init__(self, admin_service: AdminService) -> None:
        self.admin_service = admin_service

    async def execute(self, request: UpdateAdminRequest) -> AdminView:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_ADMINS
        )
        admin = await self.admin_service.update_admin(
            AdminId(UUID(request.target_id)),
            name=request.name,
            role=request.role,
            permissions=set(request.permissions)
            if request.permissions is not None
            else None,
            is_active=request.is_active,
        )
        return AdminView.from_admin(admin)


class DeleteAdminUseCase(BaseUseCase[DeleteAdminRequest, None]):
    """Use case for removing an admin; super admins and oneself are protected."""

    def __init__(self, admin_service: AdminService) -> None:
        self.admin_service = admin_service

    async def execute(self, request: DeleteAdminRequest) -> None:
        actor_id = AdminId(UUID(request.admin_id))
        await self.admin_service.require_permission(actor_id, Permission.MANAGE_ADMINS)
        await self.admin_service.delete_admin(actor_id, AdminId(UUID(request.target_id)))
