"""PostgreSQL implementation of Notification repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.domain.model import Notification
from skillswap.domain.repository import NotificationRepository
from skillswap.domain.value import (
    AccountId,
    NotificationId,
    NotificationType,
    PageRequest,
)
from skillswap.persistence.mappers import notification_to_dict, row_to_notification
from skillswap.persistence.tables import notifications_table

notifications = notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        stmt = select(notifications).where(notifications.c.id == notification_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_notification(dict(row)) if row else None

    async def find_many(self, notification_ids: list[NotificationId]) -> list[Notification]:
        if not notification_ids:
            return []
        stmt = select(notifications).where(notifications.c.id.in_(notification_ids))
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def save(self, notification: Notification) -> Notification:
        """Insert inside a SAVEPOINT.

        A failed insert only rolls back to the savepoint, leaving the
        caller's transaction usable.
        """
        async with self.session.begin_nested():
            await self.session.execute(
                insert(notifications).values(**notification_to_dict(notification))
            )
        return notification

    async def save_many(self, notifications_batch: list[Notification]) -> int:
        if not notifications_batch:
            return 0
        await self.session.execute(
            insert(notifications),
            [notification_to_dict(n) for n in notifications_batch],
        )
        await self.session.flush()
        return len(notifications_batch)

    async def list_for_user(
        self,
        user_id: AccountId,
        page: PageRequest,
        type: NotificationType | None = None,
        unread_only: bool = False,
    ) -> tuple[list[Notification], int]:
        conditions = [notifications.c.user_id == user_id]
        if type is not None:
            conditions.append(notifications.c.type == type.value)
        if unread_only:
            conditions.append(notifications.c.read.is_(False))

        count_stmt = select(func.count()).select_from(notifications).where(*conditions)
        stmt = (
            select(notifications)
            .where(*conditions)
            .order_by(notifications.c.created_at.desc())
            .limit(page.limit)
            .offset(page.offset)
        )

        total = (await self.session.execute(count_stmt)).scalar() or 0
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()], total

    async def count_unread(self, user_id: AccountId) -> int:
        stmt = (
            select(func.count())
            .select_from(notifications)
            .where(notifications.c.user_id == user_id)
            .where(notifications.c.read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_read(
        self, user_id: AccountId, notification_ids: list[NotificationId] | None = None
    ) -> int:
        stmt = (
            update(notifications)
            .where(notifications.c.user_id == user_id)
            .where(notifications.c.read.is_(False))
            .values(read=True, updated_at=func.now())
            .returning(notifications.c.id)
        )
        if notification_ids is not None:
            if not notification_ids:
                return 0
            stmt = stmt.where(notifications.c.id.in_(notification_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return len(result.all())

    async def _delete_where(self, *conditions) -> int:
        stmt = delete(notifications).where(*conditions).returning(notifications.c.id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return len(result.all())

    async def delete_many(self, notification_ids: list[NotificationId]) -> int:
        if not notification_ids:
            return 0
        return await self._delete_where(notifications.c.id.in_(notification_ids))

    async def delete_for_user(self, user_id: AccountId) -> int:
        return await self._delete_where(notifications.c.user_id == user_id)

    async def delete_read_before(self, cutoff: datetime) -> int:
        return await self._delete_where(
            notifications.c.read.is_(True), notifications.c.created_at < cutoff
        )

    async def count_by_type(self) -> dict[NotificationType, int]:
        stmt = select(notifications.c.type, func.count().label("notifications")).group_by(
            notifications.c.type
        )
        result = await self.session.execute(stmt)
        return {NotificationType(row.type): row.notifications for row in result.all()}

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(notifications))
        return result.scalar() or 0
