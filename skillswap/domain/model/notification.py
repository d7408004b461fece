"""Notification entity."""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from pydantic import Field

from skillswap.domain.model.common import DomainModel, utc_now
from skillswap.domain.value import AccountId, NotificationId, NotificationType, SwapId

DEFAULT_TITLES: dict[str, str] = {
    NotificationType.SWAP_REQUEST.value: "New Swap Request",
    NotificationType.SWAP_ACCEPTED.value: "Swap Request Accepted",
    NotificationType.SWAP_REJECTED.value: "Swap Request Rejected",
    NotificationType.SWAP_CANCELLED.value: "Swap Request Cancelled",
    NotificationType.SWAP_COMPLETED.value: "Swap Completed",
    NotificationType.FEEDBACK_RECEIVED.value: "New Feedback Received",
    NotificationType.ADMIN_MESSAGE.value: "Admin Message",
    NotificationType.SYSTEM.value: "System Notification",
}


def default_title(notification_type: NotificationType | str) -> str:
    """Title used when a notification is created without one."""
    key = (
        notification_type.value
        if isinstance(notification_type, NotificationType)
        else notification_type
    )
    return DEFAULT_TITLES.get(key, "Notification")


class Notification(DomainModel):
    """Persisted event record addressed to one account."""

    id: NotificationId
    user_id: AccountId
    type: NotificationType
    title: str = Field(min_length=1, max_length=100)
    message: str = Field(min_length=1, max_length=500)
    read: bool = False
    data: dict[str, Any] = Field(default_factory=dict)
    related_account_id: Optional[AccountId] = None
    related_swap_id: Optional[SwapId] = None
    email_sent: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def create(
        cls,
        user_id: AccountId,
        type: NotificationType,
        message: str,
        title: str | None = None,
        related_account_id: AccountId | None = None,
        related_swap_id: SwapId | None = None,
        data: dict[str, Any] | None = None,
    ) -> "Notification":
        """Build a new unread notification, deriving the title from the type if omitted."""
        return cls(
            id=NotificationId(uuid4()),
            user_id=user_id,
            type=type,
            title=title or default_title(type),
            message=message,
            related_account_id=related_account_id,
            related_swap_id=related_swap_id,
            data=data or {},
        )
