"""Swap request repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from skillswap.domain.model import SwapRequest
from skillswap.domain.value import (
    AccountId,
    FeedbackDirection,
    PageRequest,
    SwapBox,
    SwapId,
    SwapStatus,
)


class SwapRequestRepository(ABC):
    """Repository for SwapRequest entities.

    Status changes are written with conditional updates: the write only
    applies if the stored status still matches what the caller read, so two
    concurrent transitions on the same swap cannot both succeed.
    """

    @abstractmethod
    async def find_by_id(self, swap_id: SwapId) -> Optional[SwapRequest]:
        """Find a swap request by ID.

        Args:
            swap_id: The swap's unique identifier

        Returns:
            The swap request if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, swap: SwapRequest) -> SwapRequest:
        """Insert a new swap request."""
        pass

    @abstractmethod
    async def update_if_status(
        self, swap: SwapRequest, expected: SwapStatus
    ) -> Optional[SwapRequest]:
        """Write ``swap`` only if the stored status still equals ``expected``.

        Args:
            swap: Swap request carrying the new status and timestamps
            expected: Status the caller based its decision on

        Returns:
            The stored swap request, or None if another writer got there first
        """
        pass

    @abstractmethod
    async def mark_feedback_submitted(
        self, swap_id: SwapId, direction: FeedbackDirection
    ) -> Optional[SwapRequest]:
        """Flip one direction's feedback flag on a completed swap.

        The flag only flips if the swap is completed and the flag is still
        false.

        Returns:
            The updated swap request, or None if the guard did not hold
        """
        pass

    @abstractmethod
    async def delete_if_deletable(self, swap_id: SwapId) -> bool:
        """Delete a swap request only while it is pending or cancelled.

        Returns:
            True if the swap request was deleted
        """
        pass

    @abstractmethod
    async def delete(self, swap_id: SwapId) -> bool:
        """Delete a swap request regardless of status."""
        pass

    @abstractmethod
    async def delete_involving(self, account_id: AccountId) -> int:
        """Delete every swap where the account is either party.

        Returns:
            Number of deleted swap requests
        """
        pass

    @abstractmethod
    async def exists_pending(
        self, from_account_id: AccountId, to_account_id: AccountId
    ) -> bool:
        """Whether a pending request already exists for this directed pair."""
        pass

    @abstractmethod
    async def list_for_account(
        self,
        account_id: AccountId,
        page: PageRequest,
        box: SwapBox = SwapBox.ALL,
        status: SwapStatus | None = None,
    ) -> tuple[list[SwapRequest], int]:
        """List an account's swaps, newest first.

        Args:
            account_id: Account whose swaps to list
            page: Page to return
            box: Sent, received or both
            status: Optional status filter

        Returns:
            Tuple of (swap requests on the page, total matches)
        """
        pass

    @abstractmethod
    async def list_awaiting_feedback(
        self, account_id: AccountId, page: PageRequest
    ) -> tuple[list[SwapRequest], int]:
        """Completed swaps where ``account_id`` has not yet left feedback.

        Returns:
            Tuple of (swap requests on the page, total matches), most recently
            completed first
        """
        pass

    @abstractmethod
    async def list_all(
        self, page: PageRequest, status: SwapStatus | None = None
    ) -> tuple[list[SwapRequest], int]:
        """List all swaps for moderation, newest first."""
        pass

    @abstractmethod
    async def count_by_status(
        self, account_id: AccountId | None = None
    ) -> dict[SwapStatus, int]:
        """Count swaps per status, optionally for one account (either party).

        Every status is present in the result, with 0 where there are none.
        """
        pass

    @abstractmethod
    async def count(
        self,
        created_since: datetime | None = None,
        completed_since: datetime | None = None,
    ) -> int:
        """Count swaps, optionally by creation or completion time."""
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 5) -> list[SwapRequest]:
        """Most recently created swaps."""
        pass
