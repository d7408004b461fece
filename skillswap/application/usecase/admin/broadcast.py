"""Admin broadcast notification use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field, field_validator

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ApiModel
from skillswap.domain.error import ValidationError
from skillswap.domain.service import AccountService, AdminService, NotificationService
from skillswap.domain.value import AccountId, AdminId, NotificationType, Permission

BROADCAST_TYPES = frozenset({NotificationType.ADMIN_MESSAGE, NotificationType.SYSTEM})


class BroadcastRequest(BaseModel):
    """Broadcast request.

    Either ``send_to_all`` or a list of ``user_ids`` selects the recipients.
    """

    admin_id: str
    type: NotificationType = NotificationType.ADMIN_MESSAGE
    title: str = Field(min_length=1, max_length=100)
    message: str = Field(min_length=1, max_length=500)
    send_to_all: bool = False
    user_ids: list[str] | None = None

    @field_validator("type")
    @classmethod
    def broadcastable_type(cls, v: NotificationType) -> NotificationType:
        if v not in BROADCAST_TYPES:
            raise ValueError("Type must be admin_message or system")
        return v


class BroadcastResponse(ApiModel):
    sent_count: int


class BroadcastUseCase(BaseUseCase[BroadcastRequest, BroadcastResponse]):
    """Use case for admin messages to many accounts at once.

    Banned accounts never receive broadcasts, even when listed explicitly.
    """

    def __init__(
        self,
        admin_service: AdminService,
        account_service: AccountService,
        notification_service: NotificationService,
    ) -> None:
        self.admin_service = admin_service
        self.account_service = account_service
        self.notification_service = notification_service

    async def execute(self, request: BroadcastRequest) -> BroadcastResponse:
        """Execute broadcast.

        Raises:
            NotAuthorizedError: If the admin lacks send_notifications
            ValidationError: If no recipients were selected
        """
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.SEND_NOTIFICATIONS
        )
        with logfire.span(
            "broadcast.execute", type=request.type.value, send_to_all=request.send_to_all
        ):
            if request.send_to_all:
                recipients = await self.account_service.active_ids()
            elif request.user_ids:
                wanted = list(dict.fromkeys(AccountId(UUID(v)) for v in request.user_ids))
                recipients = await self.account_service.active_ids(wanted)
            else:
                raise ValidationError("Either sendToAll or userIds must be provided")

            sent = await self.notification_service.broadcast(
                recipients,
                type=request.type,
                title=request.title.strip(),
                message=request.message.strip(),
                data={"adminMessage": True},
            )
            return BroadcastResponse(sent_count=sent)
