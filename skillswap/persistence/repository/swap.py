"""PostgreSQL implementation of SwapRequest repository."""

from datetime import datetime
from typing import Any, Optional

import logfire
from sqlalchemy import and_, delete, func, insert, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.domain.error import ConflictError
from skillswap.domain.model import SwapRequest
from skillswap.domain.model.swap import DELETABLE_STATUSES
from skillswap.domain.repository import SwapRequestRepository
from skillswap.domain.value import (
    AccountId,
    FeedbackDirection,
    PageRequest,
    SwapBox,
    SwapId,
    SwapStatus,
)
from skillswap.persistence.mappers import row_to_swap, swap_to_dict
from skillswap.persistence.tables import PENDING_PAIR_INDEX, swap_requests_table

swaps = swap_requests_table


def _involving(account_id: AccountId) -> Any:
    return or_(swaps.c.from_account_id == account_id, swaps.c.to_account_id == account_id)


class PostgresSwapRequestRepository(SwapRequestRepository):
    """PostgreSQL implementation of SwapRequestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, swap_id: SwapId) -> Optional[SwapRequest]:
        stmt = select(swaps).where(swaps.c.id == swap_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_swap(dict(row)) if row else None

    async def create(self, swap: SwapRequest) -> SwapRequest:
        """Insert a new request.

        Raises:
            ConflictError: If a pending request for the same directed pair
                was inserted concurrently
        """
        stmt = insert(swaps).values(**swap_to_dict(swap))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            if PENDING_PAIR_INDEX not in str(e.orig):
                raise
            logfire.warn(
                "Concurrent duplicate swap request",
                from_account_id=str(swap.from_account_id),
                to_account_id=str(swap.to_account_id),
            )
            raise ConflictError(
                "You already have a pending swap request with this user"
            ) from e
        return swap

    async def update_if_status(
        self, swap: SwapRequest, expected: SwapStatus
    ) -> Optional[SwapRequest]:
        """Conditional status write (compare-and-set on ``status``)."""
        with logfire.span(
            "swap_repository.update_if_status",
            swap_id=str(swap.id),
            expected=expected.value,
            target=swap.status.value,
        ):
            stmt = (
                update(swaps)
                .where(swaps.c.id == swap.id)
                .where(swaps.c.status == expected.value)
                .values(
                    status=swap.status.value,
                    accepted_at=swap.accepted_at,
                    completed_at=swap.completed_at,
                    updated_at=swap.updated_at,
                )
                .returning(swaps)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if row is None:
                logfire.warn("Swap status changed concurrently", swap_id=str(swap.id))
                return None

            await self.session.flush()
            return row_to_swap(dict(row))

    async def mark_feedback_submitted(
        self, swap_id: SwapId, direction: FeedbackDirection
    ) -> Optional[SwapRequest]:
        flag = (
            swaps.c.feedback_from_user
            if direction is FeedbackDirection.FROM_USER
            else swaps.c.feedback_to_user
        )
        stmt = (
            update(swaps)
            .where(swaps.c.id == swap_id)
            .where(swaps.c.status == SwapStatus.COMPLETED.value)
            .where(flag.is_(False))
            .values({flag: True, swaps.c.updated_at: func.now()})
            .returning(swaps)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            return None

        await self.session.flush()
        return row_to_swap(dict(row))

    async def delete_if_deletable(self, swap_id: SwapId) -> bool:
        stmt = (
            delete(swaps)
            .where(swaps.c.id == swap_id)
            .where(swaps.c.status.in_([status.value for status in DELETABLE_STATUSES]))
            .returning(swaps.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.first() is not None

    async def delete(self, swap_id: SwapId) -> bool:
        stmt = delete(swaps).where(swaps.c.id == swap_id).returning(swaps.c.id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.first() is not None

    async def delete_involving(self, account_id: AccountId) -> int:
        stmt = delete(swaps).where(_involving(account_id)).returning(swaps.c.id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return len(result.all())

    async def exists_pending(
        self, from_account_id: AccountId, to_account_id: AccountId
    ) -> bool:
        stmt = select(swaps.c.id).where(
            and_(
                swaps.c.from_account_id == from_account_id,
                swaps.c.to_account_id == to_account_id,
                swaps.c.status == SwapStatus.PENDING.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def _page(
        self, conditions: list[Any], order_by: Any, page: PageRequest
    ) -> tuple[list[SwapRequest], int]:
        count_stmt = select(func.count()).select_from(swaps)
        stmt = select(swaps)
        if conditions:
            count_stmt = count_stmt.where(*conditions)
            stmt = stmt.where(*conditions)
        stmt = stmt.order_by(order_by).limit(page.limit).offset(page.offset)

        total = (await self.session.execute(count_stmt)).scalar() or 0
        result = await self.session.execute(stmt)
        return [row_to_swap(dict(row)) for row in result.mappings().all()], total

    async def list_for_account(
        self,
        account_id: AccountId,
        page: PageRequest,
        box: SwapBox = SwapBox.ALL,
        status: SwapStatus | None = None,
    ) -> tuple[list[SwapRequest], int]:
        if box is SwapBox.SENT:
            conditions = [swaps.c.from_account_id == account_id]
        elif box is SwapBox.RECEIVED:
            conditions = [swaps.c.to_account_id == account_id]
        else:
            conditions = [_involving(account_id)]
        if status is not None:
            conditions.append(swaps.c.status == status.value)
        return await self._page(conditions, swaps.c.created_at.desc(), page)

    async def list_awaiting_feedback(
        self, account_id: AccountId, page: PageRequest
    ) -> tuple[list[SwapRequest], int]:
        conditions = [
            swaps.c.status == SwapStatus.COMPLETED.value,
            or_(
                and_(
                    swaps.c.from_account_id == account_id,
                    swaps.c.feedback_from_user.is_(False),
                ),
                and_(
                    swaps.c.to_account_id == account_id,
                    swaps.c.feedback_to_user.is_(False),
                ),
            ),
        ]
        return await self._page(conditions, swaps.c.completed_at.desc(), page)

    async def list_all(
        self, page: PageRequest, status: SwapStatus | None = None
    ) -> tuple[list[SwapRequest], int]:
        conditions = [swaps.c.status == status.value] if status is not None else []
        return await self._page(conditions, swaps.c.created_at.desc(), page)

    async def count_by_status(
        self, account_id: AccountId | None = None
    ) -> dict[SwapStatus, int]:
        stmt = select(swaps.c.status, func.count().label("swaps")).group_by(
            swaps.c.status
        )
        if account_id is not None:
            stmt = stmt.where(_involving(account_id))
        result = await self.session.execute(stmt)

        counts = {status: 0 for status in SwapStatus}
        for row in result.all():
            counts[SwapStatus(row.status)] = row.swaps
        return counts

    async def count(
        self,
        created_since: datetime | None = None,
        completed_since: datetime | None = None,
    ) -> int:
        stmt = select(func.count()).select_from(swaps)
        if created_since is not None:
            stmt = stmt.where(swaps.c.created_at >= created_since)
        if completed_since is not None:
            stmt = stmt.where(swaps.c.status == SwapStatus.COMPLETED.value).where(
                swaps.c.completed_at >= completed_since
            )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_recent(self, limit: int = 5) -> list[SwapRequest]:
        stmt = select(swaps).order_by(swaps.c.created_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_swap(dict(row)) for row in result.mappings().all()]
