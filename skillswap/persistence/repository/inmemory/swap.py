"""In-memory swap request repository for testing."""

from datetime import datetime
from typing import Optional

from skillswap.domain.model import SwapRequest
from skillswap.domain.model.common import utc_now
from skillswap.domain.repository import SwapRequestRepository
from skillswap.domain.value import (
    AccountId,
    FeedbackDirection,
    PageRequest,
    SwapBox,
    SwapId,
    SwapStatus,
)


class InMemorySwapRequestRepository(SwapRequestRepository):
    """In-memory implementation of SwapRequestRepository for testing."""

    def __init__(self) -> None:
        self._swaps: dict[SwapId, SwapRequest] = {}

    async def find_by_id(self, swap_id: SwapId) -> Optional[SwapRequest]:
        return self._swaps.get(swap_id)

    async def create(self, swap: SwapRequest) -> SwapRequest:
        self._swaps[swap.id] = swap
        return swap

    async def update_if_status(
        self, swap: SwapRequest, expected: SwapStatus
    ) -> Optional[SwapRequest]:
        stored = self._swaps.get(swap.id)
        if stored is None or stored.status != expected:
            return None
        updated = stored.model_copy(
            update={
                "status": swap.status,
                "accepted_at": swap.accepted_at,
                "completed_at": swap.completed_at,
                "updated_at": swap.updated_at,
            }
        )
        self._swaps[swap.id] = updated
        return updated

    async def mark_feedback_submitted(
        self, swap_id: SwapId, direction: FeedbackDirection
    ) -> Optional[SwapRequest]:
        stored = self._swaps.get(swap_id)
        if (
            stored is None
            or stored.status != SwapStatus.COMPLETED
            or stored.feedback_submitted.is_submitted(direction)
        ):
            return None
        updated = stored.with_feedback_from(direction).model_copy(
            update={"updated_at": utc_now()}
        )
        self._swaps[swap_id] = updated
        return updated

    async def delete_if_deletable(self, swap_id: SwapId) -> bool:
        stored = self._swaps.get(swap_id)
        if stored is None or not stored.is_deletable:
            return False
        del self._swaps[swap_id]
        return True

    async def delete(self, swap_id: SwapId) -> bool:
        return self._swaps.pop(swap_id, None) is not None

    async def delete_involving(self, account_id: AccountId) -> int:
        doomed = [s.id for s in self._swaps.values() if s.involves(account_id)]
        for swap_id in doomed:
            del self._swaps[swap_id]
        return len(doomed)

    async def exists_pending(
        self, from_account_id: AccountId, to_account_id: AccountId
    ) -> bool:
        return any(
            s.from_account_id == from_account_id
            and s.to_account_id == to_account_id
            and s.status == SwapStatus.PENDING
            for s in self._swaps.values()
        )

    @staticmethod
    def _page(
        swaps: list[SwapRequest], page: PageRequest
    ) -> tuple[list[SwapRequest], int]:
        return swaps[page.offset : page.offset + page.limit], len(swaps)

    async def list_for_account(
        self,
        account_id: AccountId,
        page: PageRequest,
        box: SwapBox = SwapBox.ALL,
        status: SwapStatus | None = None,
    ) -> tuple[list[SwapRequest], int]:
        def in_box(swap: SwapRequest) -> bool:
            if box is SwapBox.SENT:
                return swap.from_account_id == account_id
            if box is SwapBox.RECEIVED:
                return swap.to_account_id == account_id
            return swap.involves(account_id)

        matches = [
            s
            for s in self._swaps.values()
            if in_box(s) and (status is None or s.status == status)
        ]
        matches.sort(key=lambda s: s.created_at, reverse=True)
        return self._page(matches, page)

    async def list_awaiting_feedback(
        self, account_id: AccountId, page: PageRequest
    ) -> tuple[list[SwapRequest], int]:
        matches = []
        for swap in self._swaps.values():
            direction = swap.direction_of(account_id)
            if (
                swap.status == SwapStatus.COMPLETED
                and direction is not None
                and not swap.feedback_submitted.is_submitted(direction)
            ):
                matches.append(swap)
        matches.sort(key=lambda s: s.completed_at or s.updated_at, reverse=True)
        return self._page(matches, page)

    async def list_all(
        self, page: PageRequest, status: SwapStatus | None = None
    ) -> tuple[list[SwapRequest], int]:
        matches = [
            s for s in self._swaps.values() if status is None or s.status == status
        ]
        matches.sort(key=lambda s: s.created_at, reverse=True)
        return self._page(matches, page)

    async def count_by_status(
        self, account_id: AccountId | None = None
    ) -> dict[SwapStatus, int]:
        counts = {status: 0 for status in SwapStatus}
        for swap in self._swaps.values():
            if account_id is None or swap.involves(account_id):
                counts[swap.status] += 1
        return counts

    async def count(
        self,
        created_since: datetime | None = None,
        completed_since: datetime | None = None,
    ) -> int:
        total = 0
        for swap in self._swaps.values():
            if created_since is not None and swap.created_at < created_since:
                continue
            if completed_since is not None and (
                swap.completed_at is None or swap.completed_at < completed_since
            ):
                continue
            total += 1
        return total

    async def find_recent(self, limit: int = 5) -> list[SwapRequest]:
        return sorted(self._swaps.values(), key=lambda s: s.created_at, reverse=True)[
            :limit
        ]
