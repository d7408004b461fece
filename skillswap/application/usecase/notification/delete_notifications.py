"""Delete notifications use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ApiModel
from skillswap.domain.service import NotificationService
from skillswap.domain.value import AccountId, NotificationId


class DeleteNotificationRequest(BaseModel):
    account_id: str
    notification_id: str


class DeleteNotificationsRequest(BaseModel):
    """Delete several notifications at once."""

    account_id: str
    notification_ids: list[str] = Field(min_length=1)


class DeleteNotificationsResponse(ApiModel):
    deleted: int


class DeleteNotificationUseCase(BaseUseCase[DeleteNotificationRequest, None]):
    """Use case for deleting one of the caller's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: DeleteNotificationRequest) -> None:
        await self.notification_service.delete(
            AccountId(UUID(request.account_id)),
            NotificationId(UUID(request.notification_id)),
        )


class DeleteNotificationsUseCase(
    BaseUseCase[DeleteNotificationsRequest, DeleteNotificationsResponse]
):
    """Use case for bulk deletion; nothing is deleted if any ID is foreign."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: DeleteNotificationsRequest
    ) -> DeleteNotificationsResponse:
        deleted = await self.notification_service.delete_many(
            AccountId(UUID(request.account_id)),
            [NotificationId(UUID(value)) for value in request.notification_ids],
        )
        return DeleteNotificationsResponse(deleted=deleted)
