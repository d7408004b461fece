"""In-memory account repository for testing."""

from collections import Counter
from datetime import datetime
from typing import Optional

from skillswap.domain.model import Account, Feedback
from skillswap.domain.repository import (
    AccountListing,
    AccountRepository,
    AccountSearch,
    SkillSide,
)
from skillswap.domain.value import (
    AccountId,
    AccountStatusFilter,
    EmailAddress,
    FeedbackId,
    PageRequest,
)


def _contains(haystack: Optional[str], needle: str) -> bool:
    return haystack is not None and needle.lower() in haystack.lower()


def _has_any(skills: list[str], wanted: list[str]) -> bool:
    lowered = {skill.lower() for skill in wanted}
    return any(skill.lower() in lowered for skill in skills)


def _paginate(items: list, page: PageRequest) -> tuple[list, int]:
    return items[page.offset : page.offset + page.limit], len(items)


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}

    async def find_by_id(
        self, account_id: AccountId, for_update: bool = False
    ) -> Optional[Account]:
        return self._accounts.get(account_id)

    async def find_by_email(self, email: EmailAddress) -> Optional[Account]:
        for account in self._accounts.values():
            if account.email == email:
                return account
        return None

    async def find_by_feedback_id(
        self, feedback_id: FeedbackId, for_update: bool = False
    ) -> Optional[Account]:
        for account in self._accounts.values():
            if account.find_feedback(feedback_id):
                return account
        return None

    async def find_rated_by(self, rater_id: AccountId) -> list[Account]:
        return [
            account
            for account in self._accounts.values()
            if account.feedback_from(rater_id)
        ]

    async def find_many(self, account_ids: list[AccountId]) -> list[Account]:
        return [self._accounts[i] for i in account_ids if i in self._accounts]

    async def save(self, account: Account) -> Account:
        self._accounts[account.id] = account
        return account

    async def delete(self, account_id: AccountId) -> bool:
        return self._accounts.pop(account_id, None) is not None

    def _matches(self, account: Account, criteria: AccountSearch) -> bool:
        if not account.is_public or account.is_banned:
            return False
        if criteria.text and not (
            _contains(account.name, criteria.text)
            or _contains(account.location, criteria.text)
            or _contains(" ".join(account.skills_offered), criteria.text)
            or _contains(" ".join(account.skills_wanted), criteria.text)
        ):
            return False
        if criteria.skills_offered and not _has_any(
            account.skills_offered, criteria.skills_offered
        ):
            return False
        if criteria.skills_wanted and not _has_any(
            account.skills_wanted, criteria.skills_wanted
        ):
            return False
        if criteria.availability and account.availability != criteria.availability:
            return False
        if criteria.location and not _contains(account.location, criteria.location):
            return False
        return True

    async def search(
        self, criteria: AccountSearch, page: PageRequest
    ) -> tuple[list[Account], int]:
        matches = [a for a in self._accounts.values() if self._matches(a, criteria)]
        # Newest first, then stable sort by rating keeps the tie order
        matches.sort(key=lambda a: a.created_at, reverse=True)
        matches.sort(key=lambda a: a.average_rating, reverse=True)
        return _paginate(matches, page)

    async def list_accounts(
        self, listing: AccountListing, page: PageRequest
    ) -> tuple[list[Account], int]:
        matches = []
        for account in self._accounts.values():
            if listing.text and not (
                _contains(account.name, listing.text)
                or _contains(account.email.root, listing.text)
                or _contains(account.location, listing.text)
            ):
                continue
            if listing.status is AccountStatusFilter.ACTIVE and account.is_banned:
                continue
            if listing.status is AccountStatusFilter.BANNED and not account.is_banned:
                continue
            if listing.status is AccountStatusFilter.UNVERIFIED and account.is_verified:
                continue
            matches.append(account)
        matches.sort(key=lambda a: a.created_at, reverse=True)
        return _paginate(matches, page)

    async def find_active_ids(
        self, account_ids: list[AccountId] | None = None
    ) -> list[AccountId]:
        candidates = (
            [self._accounts[i] for i in account_ids if i in self._accounts]
            if account_ids is not None
            else list(self._accounts.values())
        )
        return [account.id for account in candidates if not account.is_banned]

    async def count(
        self,
        is_banned: bool | None = None,
        created_since: datetime | None = None,
    ) -> int:
        return sum(
            1
            for account in self._accounts.values()
            if (is_banned is None or account.is_banned == is_banned)
            and (created_since is None or account.created_at >= created_since)
        )

    async def find_recent(self, limit: int = 5) -> list[Account]:
        return sorted(
            self._accounts.values(), key=lambda a: a.created_at, reverse=True
        )[:limit]

    async def top_skills(self, side: SkillSide, limit: int = 10) -> list[tuple[str, int]]:
        counter: Counter[str] = Counter()
        for account in self._accounts.values():
            counter.update(
                account.skills_offered if side == "offered" else account.skills_wanted
            )
        return sorted(counter.items(), key=lambda item: (-item[1], item[0]))[:limit]

    async def list_feedback(
        self, page: PageRequest, min_stars: int | None = None
    ) -> tuple[list[tuple[AccountId, Feedback]], int]:
        entries = [
            (account.id, entry)
            for account in self._accounts.values()
            for entry in account.feedback
            if min_stars is None or entry.stars >= min_stars
        ]
        entries.sort(key=lambda pair: pair[1].created_at, reverse=True)
        return _paginate(entries, page)
