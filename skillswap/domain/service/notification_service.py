"""Notification domain service."""

from datetime import datetime, timedelta
from typing import Any

import logfire

from skillswap.config import NotificationSettings
from skillswap.domain.error import NotAuthorizedError, NotFoundError
from skillswap.domain.model import Notification
from skillswap.domain.model.common import utc_now
from skillswap.domain.repository import NotificationRepository
from skillswap.domain.value import (
    AccountId,
    NotificationId,
    NotificationType,
    PageRequest,
    SwapId,
)

from .base import Service


class NotificationService(Service):
    """Domain service for notification fan-out and inbox bookkeeping."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        settings: NotificationSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            settings: Notification settings (retention)
        """
        self.notification_repository = notification_repository
        self.settings = settings

    async def create(
        self,
        user_id: AccountId,
        type: NotificationType,
        message: str,
        title: str | None = None,
        related_account_id: AccountId | None = None,
        related_swap_id: SwapId | None = None,
        data: dict[str, Any] | None = None,
    ) -> Notification:
        """Create a notification.

        The title defaults to the fixed title for ``type``.

        Returns:
            Saved notification
        """
        with logfire.span(
            "notification_service.create", user_id=str(user_id), type=type.value
        ):
            notification = Notification.create(
                user_id=user_id,
                type=type,
                message=message,
                title=title,
                related_account_id=related_account_id,
                related_swap_id=related_swap_id,
                data=data,
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                user_id=str(user_id),
                type=type.value,
            )
            return saved

    async def notify(
        self,
        user_id: AccountId,
        type: NotificationType,
        message: str,
        title: str | None = None,
        related_account_id: AccountId | None = None,
        related_swap_id: SwapId | None = None,
        data: dict[str, Any] | None = None,
    ) -> Notification | None:
        """Create a notification as a side effect of another operation.

        Failures are logged and swallowed so they never undo the operation
        that triggered them.

        Returns:
            Saved notification, or None if it could not be created
        """
        try:
            return await self.create(
                user_id=user_id,
                type=type,
                message=message,
                title=title,
                related_account_id=related_account_id,
                related_swap_id=related_swap_id,
                data=data,
            )
        except Exception as e:
            logfire.error(
                "Notification side effect failed",
                user_id=str(user_id),
                type=type.value,
                error=str(e),
                error_type=e.__class__.__name__,
            )
            return None

    async def broadcast(
        self,
        user_ids: list[AccountId],
        type: NotificationType,
        title: str,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> int:
        """Send the same notification to many accounts.

        Returns:
            Number of notifications created
        """
        with logfire.span(
            "notification_service.broadcast", recipients=len(user_ids), type=type.value
        ):
            notifications = [
                Notification.create(
                    user_id=user_id, type=type, title=title, message=message, data=data
                )
                for user_id in user_ids
            ]
            created = await self.notification_repository.save_many(notifications)
            logfire.info("Notifications broadcast", count=created, type=type.value)
            return created

    async def list_for_user(
        self,
        user_id: AccountId,
        page: PageRequest,
        type: NotificationType | None = None,
        unread_only: bool = False,
    ) -> tuple[list[Notification], int]:
        """List a user's notifications newest first.

        Returns:
            Tuple of (notifications on the page, total matches)
        """
        with logfire.span(
            "notification_service.list_for_user",
            user_id=str(user_id),
            page=page.page,
            unread_only=unread_only,
        ):
            return await self.notification_repository.list_for_user(
                user_id, page, type=type, unread_only=unread_only
            )

    async def count_unread(self, user_id: AccountId) -> int:
        return await self.notification_repository.count_unread(user_id)

    async def mark_read(
        self, user_id: AccountId, notification_ids: list[NotificationId] | None = None
    ) -> int:
        """Mark specific notifications, or all of them, as read.

        IDs that belong to someone else are ignored.
        """
        with logfire.span(
            "notification_service.mark_read",
            user_id=str(user_id),
            all=notification_ids is None,
        ):
            changed = await self.notification_repository.mark_read(
                user_id, notification_ids
            )
            logfire.info("Notifications marked read", user_id=str(user_id), count=changed)
            return changed

    async def delete(self, user_id: AccountId, notification_id: NotificationId) -> None:
        """Delete one of the caller's notifications.

        Raises:
            NotFoundError: If the notification does not exist
            NotAuthorizedError: If it belongs to another account
        """
        with logfire.span(
            "notification_service.delete",
            user_id=str(user_id),
            notification_id=str(notification_id),
        ):
            notification = await self.notification_repository.find_by_id(
                notification_id
            )
            if notification is None:
                raise NotFoundError("Notification", str(notification_id))
            if notification.user_id != user_id:
                raise NotAuthorizedError(
                    "notification", str(notification_id), str(user_id), action="delete"
                )
            await self.notification_repository.delete_many([notification_id])
            logfire.info("Notification deleted", notification_id=str(notification_id))

    async def delete_many(
        self, user_id: AccountId, notification_ids: list[NotificationId]
    ) -> int:
        """Delete several of the caller's notifications, all or nothing.

        Raises:
            NotFoundError: If any notification does not exist
            NotAuthorizedError: If any notification belongs to another account
        """
        with logfire.span(
            "notification_service.delete_many",
            user_id=str(user_id),
            count=len(notification_ids),
        ):
            wanted = set(notification_ids)
            found = await self.notification_repository.find_many(list(wanted))
            missing = wanted - {notification.id for notification in found}
            if missing:
                raise NotFoundError("Notification", ", ".join(sorted(map(str, missing))))
            foreign = [n for n in found if n.user_id != user_id]
            if foreign:
                raise NotAuthorizedError(
                    "notification",
                    str(foreign[0].id),
                    str(user_id),
                    message="Some notifications don't belong to you",
                )
            deleted = await self.notification_repository.delete_many(list(wanted))
            logfire.info("Notifications deleted", user_id=str(user_id), count=deleted)
            return deleted

    async def delete_all_for(self, user_id: AccountId) -> int:
        """Delete every notification addressed to an account."""
        return await self.notification_repository.delete_for_user(user_id)

    async def purge_read_older_than(
        self, days: int | None = None, now: datetime | None = None
    ) -> int:
        """Retention sweep: delete read notifications older than ``days``.

        Args:
            days: Age threshold, defaults to the configured retention
            now: Reference time, defaults to the current time

        Returns:
            Number of purged notifications
        """
        days = self.settings.retention_days if days is None else days
        cutoff = (now or utc_now()) - timedelta(days=days)
        with logfire.span(
            "notification_service.purge_read_older_than", cutoff=cutoff.isoformat()
        ):
            purged = await self.notification_repository.delete_read_before(cutoff)
            logfire.info("Old notifications purged", count=purged, days=days)
            return purged
