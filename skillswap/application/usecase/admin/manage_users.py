"""Admin user moderation use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from skillswap.application.usecase.account.profile_photo import discard_photo
from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.swap.swap_stats import SwapStatsResponse
from skillswap.application.usecase.views import (
    ApiModel,
    Pagination,
    PrivateProfileView,
)
from skillswap.domain.repository import AccountListing
from skillswap.domain.service import (
    AccountService,
    AdminService,
    MediaStorage,
    NotificationService,
    SwapService,
)
from skillswap.domain.value import (
    AccountId,
    AccountStatusFilter,
    AdminId,
    NotificationType,
    PageRequest,
    Permission,
)


class ListUsersRequest(BaseModel):
    """Admin user listing request."""

    admin_id: str
    search: str | None = Field(default=None, max_length=100)
    status: AccountStatusFilter | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class UserListResponse(ApiModel):
    users: list[PrivateProfileView]
    pagination: Pagination


class AdminUserRequest(BaseModel):
    admin_id: str
    user_id: str


class UserDetailResponse(ApiModel):
    user: PrivateProfileView
    swap_stats: SwapStatsResponse


class UpdateUserRequest(BaseModel):
    """Moderation flags to change; omitted flags stay as they are."""

    admin_id: str
    user_id: str
    is_banned: bool | None = None
    is_verified: bool | None = None
    ban_reason: str | None = Field(default=None, max_length=500)


class ListUsersUseCase(BaseUseCase[ListUsersRequest, UserListResponse]):
    """Use case for browsing every account, banned and private included."""

    def __init__(
        self, admin_service: AdminService, account_service: AccountService
    ) -> None:
        self.admin_service = admin_service
        self.account_service = account_service

    async def execute(self, request: ListUsersRequest) -> UserListResponse:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_USERS
        )
        page = PageRequest(page=request.page, limit=request.limit)
        accounts, total = await self.account_service.list_accounts(
            AccountListing(
                text=(request.search or "").strip() or None, status=request.status
            ),
            page,
        )
        return UserListResponse(
            users=[PrivateProfileView.from_account(a) for a in accounts],
            pagination=Pagination.of(page, total),
        )


class GetUserUseCase(BaseUseCase[AdminUserRequest, UserDetailResponse]):
    """Use case for one account with its swap counters."""

    def __init__(
        self,
        admin_service: AdminService,
        account_service: AccountService,
        swap_service: SwapService,
    ) -> None:
        self.admin_service = admin_service
        self.account_service = account_service
        self.swap_service = swap_service

    async def execute(self, request: AdminUserRequest) -> UserDetailResponse:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_USERS
        )
        account_id = AccountId(UUID(request.user_id))
        account = await self.account_service.get_by_id(account_id)
        counts = await self.swap_service.stats_for(account_id)
        return UserDetailResponse(
            user=PrivateProfileView.from_account(account),
            swap_stats=SwapStatsResponse.from_counts(counts),
        )


class UpdateUserUseCase(BaseUseCase[UpdateUserRequest, PrivateProfileView]):
    """Use case for banning, unbanning and verifying accounts.

    Banning tells the account why through an admin message. A ban does not
    revoke tokens already issued; it blocks future logins.
    """

    def __init__(
        self,
        admin_service: AdminService,
        account_service: AccountService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize update user use case.

        Args:
            admin_service: Admin service (permission check)
            account_service: Account service (moderation flags)
            notification_service: Notification fan-out (ban notice)
        """
        self.admin_service = admin_service
        self.account_service = account_service
        self.notification_service = notification_service

    async def execute(self, request: UpdateUserRequest) -> PrivateProfileView:
        """Execute moderation update.

        Raises:
            NotAuthorizedError: If the admin lacks manage_users
            NotFoundError: If the account does not exist
        """
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_USERS
        )
        with logfire.span(
            "update_user.execute",
            user_id=request.user_id,
            is_banned=request.is_banned,
            is_verified=request.is_verified,
        ):
            reason = (request.ban_reason or "").strip() or None
            account = await self.account_service.moderate(
                AccountId(UUID(request.user_id)),
                is_banned=request.is_banned,
                is_verified=request.is_verified,
                ban_reason=reason,
            )
            if request.is_banned:
                suffix = f": {reason}" if reason else ""
                await self.notification_service.notify(
                    user_id=account.id,
                    type=NotificationType.ADMIN_MESSAGE,
                    title="Account Suspended",
                    message=f"Your account has been suspended{suffix}",
                    data={"banReason": reason},
                )
            return PrivateProfileView.from_account(account)


class DeleteUserUseCase(BaseUseCase[AdminUserRequest, None]):
    """Use case for removing an account and everything that references it."""

    def __init__(
        self,
        admin_service: AdminService,
        account_service: AccountService,
        media_storage: MediaStorage,
    ) -> None:
        self.admin_service = admin_service
        self.account_service = account_service
        self.media_storage = media_storage

    async def execute(self, request: AdminUserRequest) -> None:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_USERS
        )
        account = await self.account_service.delete_account(
            AccountId(UUID(request.user_id))
        )
        await discard_photo(self.media_storage, account.profile_photo)
