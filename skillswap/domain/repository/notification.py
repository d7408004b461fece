"""Notification repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from skillswap.domain.model import Notification
from skillswap.domain.value import (
    AccountId,
    NotificationId,
    NotificationType,
    PageRequest,
)


class NotificationRepository(ABC):
    """Repository for Notification entities."""

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def find_many(self, notification_ids: list[NotificationId]) -> list[Notification]:
        """Find notifications by ID, skipping unknown IDs."""
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Implementations must isolate the write so a failure here never
        invalidates the surrounding transaction.
        """
        pass

    @abstractmethod
    async def save_many(self, notifications: list[Notification]) -> int:
        """Insert a batch of notifications.

        Returns:
            Number of inserted notifications
        """
        pass

    @abstractmethod
    async def list_for_user(
        self,
        user_id: AccountId,
        page: PageRequest,
        type: NotificationType | None = None,
        unread_only: bool = False,
    ) -> tuple[list[Notification], int]:
        """List a user's notifications, newest first.

        Returns:
            Tuple of (notifications on the page, total matches)
        """
        pass

    @abstractmethod
    async def count_unread(self, user_id: AccountId) -> int:
        """Count a user's unread notifications."""
        pass

    @abstractmethod
    async def mark_read(
        self, user_id: AccountId, notification_ids: list[NotificationId] | None = None
    ) -> int:
        """Mark a user's notifications read.

        Args:
            user_id: Owner of the notifications
            notification_ids: Specific notifications, or None for all of them

        Returns:
            Number of notifications changed
        """
        pass

    @abstractmethod
    async def delete_many(self, notification_ids: list[NotificationId]) -> int:
        """Delete notifications by ID."""
        pass

    @abstractmethod
    async def delete_for_user(self, user_id: AccountId) -> int:
        """Delete every notification addressed to a user."""
        pass

    @abstractmethod
    async def delete_read_before(self, cutoff: datetime) -> int:
        """Delete read notifications created before ``cutoff``."""
        pass

    @abstractmethod
    async def count_by_type(self) -> dict[NotificationType, int]:
        """Count notifications per type (types without rows are omitted)."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all notifications."""
        pass
