"""Account repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Literal, Optional

from skillswap.domain.model import Account, Feedback
from skillswap.domain.value import (
    AccountId,
    AccountStatusFilter,
    Availability,
    EmailAddress,
    FeedbackId,
    PageRequest,
)
from skillswap.domain.value.common import ValueObject


class AccountSearch(ValueObject):
    """Public directory search criteria.

    Only public, non-banned accounts are ever matched.
    """

    text: Optional[str] = None  # Matches name, location and skills
    skills_offered: list[str] = []  # Any-of
    skills_wanted: list[str] = []  # Any-of
    availability: Optional[Availability] = None
    location: Optional[str] = None  # Case-insensitive substring


class AccountListing(ValueObject):
    """Admin account listing criteria."""

    text: Optional[str] = None  # Matches name, email and location
    status: Optional[AccountStatusFilter] = None


SkillSide = Literal["offered", "wanted"]


class AccountRepository(ABC):
    """Repository for the Account aggregate.

    Accounts are always loaded and saved together with their feedback
    entries so the rating aggregate can be checked on every load.
    """

    @abstractmethod
    async def find_by_id(
        self, account_id: AccountId, for_update: bool = False
    ) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier
            for_update: Lock the account until the current transaction ends

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: EmailAddress) -> Optional[Account]:
        """Find an account by its (normalized) email."""
        pass

    @abstractmethod
    async def find_by_feedback_id(
        self, feedback_id: FeedbackId, for_update: bool = False
    ) -> Optional[Account]:
        """Find the account that received a feedback entry.

        Args:
            feedback_id: Feedback entry ID
            for_update: Lock the account until the current transaction ends

        Returns:
            The rated account if the entry exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_rated_by(self, rater_id: AccountId) -> list[Account]:
        """Find every account holding feedback written by ``rater_id``."""
        pass

    @abstractmethod
    async def find_many(self, account_ids: list[AccountId]) -> list[Account]:
        """Find accounts by ID, silently skipping unknown IDs."""
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Save an account with its feedback entries (create or update).

        Args:
            account: The account to save

        Returns:
            The saved account
        """
        pass

    @abstractmethod
    async def delete(self, account_id: AccountId) -> bool:
        """Delete an account and the feedback it received.

        Returns:
            True if an account was deleted
        """
        pass

    @abstractmethod
    async def search(
        self, criteria: AccountSearch, page: PageRequest
    ) -> tuple[list[Account], int]:
        """Search public, non-banned accounts.

        Results are sorted by average rating (descending), then by creation
        time (newest first).

        Args:
            criteria: Search filters
            page: Page to return

        Returns:
            Tuple of (accounts on the page, total matches)
        """
        pass

    @abstractmethod
    async def list_accounts(
        self, listing: AccountListing, page: PageRequest
    ) -> tuple[list[Account], int]:
        """List all accounts for moderation, newest first.

        Returns:
            Tuple of (accounts on the page, total matches)
        """
        pass

    @abstractmethod
    async def find_active_ids(
        self, account_ids: list[AccountId] | None = None
    ) -> list[AccountId]:
        """IDs of non-banned accounts, optionally restricted to ``account_ids``."""
        pass

    @abstractmethod
    async def count(
        self,
        is_banned: bool | None = None,
        created_since: datetime | None = None,
    ) -> int:
        """Count accounts, optionally filtered by ban flag and creation time."""
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 5) -> list[Account]:
        """Most recently created accounts."""
        pass

    @abstractmethod
    async def top_skills(self, side: SkillSide, limit: int = 10) -> list[tuple[str, int]]:
        """Most common skills across all accounts.

        Args:
            side: Offered or wanted skills
            limit: Maximum number of skills

        Returns:
            List of (skill, account count), most common first
        """
        pass

    @abstractmethod
    async def list_feedback(
        self, page: PageRequest, min_stars: int | None = None
    ) -> tuple[list[tuple[AccountId, Feedback]], int]:
        """List feedback across all accounts, newest first.

        Returns:
            Tuple of ((rated account ID, entry) pairs, total matches)
        """
        pass
