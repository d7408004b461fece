"""In-memory notification repository for testing."""

from collections import Counter
from datetime import datetime
from typing import Optional

from skillswap.domain.model import Notification
from skillswap.domain.model.common import utc_now
from skillswap.domain.repository import NotificationRepository
from skillswap.domain.value import (
    AccountId,
    NotificationId,
    NotificationType,
    PageRequest,
)


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing.

    Set ``fail_on_save`` to simulate a storage failure on single inserts.
    """

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}
        self.fail_on_save = False

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        return self._notifications.get(notification_id)

    async def find_many(self, notification_ids: list[NotificationId]) -> list[Notification]:
        return [
            self._notifications[i] for i in notification_ids if i in self._notifications
        ]

    async def save(self, notification: Notification) -> Notification:
        if self.fail_on_save:
            raise RuntimeError("Simulated notification storage failure")
        self._notifications[notification.id] = notification
        return notification

    async def save_many(self, notifications_batch: list[Notification]) -> int:
        for notification in notifications_batch:
            self._notifications[notification.id] = notification
        return len(notifications_batch)

    def _for_user(self, user_id: AccountId) -> list[Notification]:
        return [n for n in self._notifications.values() if n.user_id == user_id]

    async def list_for_user(
        self,
        user_id: AccountId,
        page: PageRequest,
        type: NotificationType | None = None,
        unread_only: bool = False,
    ) -> tuple[list[Notification], int]:
        matches = [
            n
            for n in self._for_user(user_id)
            if (type is None or n.type == type) and (not unread_only or not n.read)
        ]
        matches.sort(key=lambda n: n.created_at, reverse=True)
        return matches[page.offset : page.offset + page.limit], len(matches)

    async def count_unread(self, user_id: AccountId) -> int:
        return sum(1 for n in self._for_user(user_id) if not n.read)

    async def mark_read(
        self, user_id: AccountId, notification_ids: list[NotificationId] | None = None
    ) -> int:
        wanted = set(notification_ids) if notification_ids is not None else None
        changed = 0
        now = utc_now()
        for notification in self._for_user(user_id):
            if notification.read or (wanted is not None and notification.id not in wanted):
                continue
            self._notifications[notification.id] = notification.model_copy(
                update={"read": True, "updated_at": now}
            )
            changed += 1
        return changed

    async def delete_many(self, notification_ids: list[NotificationId]) -> int:
        return sum(
            1 for i in notification_ids if self._notifications.pop(i, None) is not None
        )

    async def delete_for_user(self, user_id: AccountId) -> int:
        return await self.delete_many([n.id for n in self._for_user(user_id)])

    async def delete_read_before(self, cutoff: datetime) -> int:
        return await self.delete_many(
            [
                n.id
                for n in self._notifications.values()
                if n.read and n.created_at < cutoff
            ]
        )

    async def count_by_type(self) -> dict[NotificationType, int]:
        return dict(Counter(n.type for n in self._notifications.values()))

    async def count(self) -> int:
        return len(self._notifications)
