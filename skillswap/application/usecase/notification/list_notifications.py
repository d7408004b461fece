"""List notifications use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ApiModel, NotificationView, Pagination
from skillswap.domain.service import NotificationService
from skillswap.domain.value import AccountId, NotificationType, PageRequest


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    account_id: str
    type: NotificationType | None = None  # None lists every type
    unread_only: bool = False
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=50)


class NotificationListResponse(ApiModel):
    """A page of notifications plus the caller's unread total."""

    notifications: list[NotificationView]
    unread_count: int
    pagination: Pagination


class GetUnreadCountRequest(BaseModel):
    account_id: str


class UnreadCountResponse(ApiModel):
    unread_count: int


class ListNotificationsUseCase(
    BaseUseCase[ListNotificationsRequest, NotificationListResponse]
):
    """Use case for the caller's notification inbox, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> NotificationListResponse:
        user_id = AccountId(UUID(request.account_id))
        page = PageRequest(page=request.page, limit=request.limit)
        notifications, total = await self.notification_service.list_for_user(
            user_id, page, type=request.type, unread_only=request.unread_only
        )
        return NotificationListResponse(
            notifications=[NotificationView.from_notification(n) for n in notifications],
            unread_count=await self.notification_service.count_unread(user_id),
            pagination=Pagination.of(page, total),
        )


class GetUnreadCountUseCase(BaseUseCase[GetUnreadCountRequest, UnreadCountResponse]):
    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> UnreadCountResponse:
        count = await self.notification_service.count_unread(
            AccountId(UUID(request.account_id))
        )
        return UnreadCountResponse(unread_count=count)
