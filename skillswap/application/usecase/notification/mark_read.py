"""Mark notifications read use case."""

from uuid import UUID

from pydantic import BaseModel

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ApiModel
from skillswap.domain.service import NotificationService
from skillswap.domain.value import AccountId, NotificationId


class MarkReadRequest(BaseModel):
    """Mark read request.

    Without IDs every notification of the caller is marked read.
    """

    account_id: str
    notification_ids: list[str] | None = None


class MarkReadResponse(ApiModel):
    updated: int
    unread_count: int


class MarkReadUseCase(BaseUseCase[MarkReadRequest, MarkReadResponse]):
    """Use case for marking notifications as read.

    IDs of notifications addressed to someone else are ignored.
    """

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> MarkReadResponse:
        user_id = AccountId(UUID(request.account_id))
        ids = (
            [NotificationId(UUID(value)) for value in request.notification_ids]
            if request.notification_ids is not None
            else None
        )
        updated = await self.notification_service.mark_read(user_id, ids)
        return MarkReadResponse(
            updated=updated,
            unread_count=await self.notification_service.count_unread(user_id),
        )
