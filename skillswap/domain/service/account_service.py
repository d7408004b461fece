"""Account domain service."""

from typing import Any
from uuid import uuid4

import logfire

from skillswap.domain.error import (
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
)
from skillswap.domain.model import Account
from skillswap.domain.model.common import utc_now
from skillswap.domain.repository import (
    AccountCredentialRepository,
    AccountListing,
    AccountRepository,
    AccountSearch,
    NotificationRepository,
    SwapRequestRepository,
)
from skillswap.domain.value import AccountId, Actor, EmailAddress, PageRequest

from .base import Service

# Profile fields an owner may change directly
PROFILE_FIELDS = frozenset(
    {
        "name",
        "location",
        "skills_offered",
        "skills_wanted",
        "availability",
        "is_public",
    }
)


class AccountService(Service):
    """Domain service for account profiles, search and deletion."""

    def __init__(
        self,
        account_repository: AccountRepository,
        credential_repository: AccountCredentialRepository,
        swap_repository: SwapRequestRepository,
        notification_repository: NotificationRepository,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            credential_repository: Credential repository (deletion cascade)
            swap_repository: Swap request repository (deletion cascade)
            notification_repository: Notification repository (deletion cascade)
        """
        self.account_repository = account_repository
        self.credential_repository = credential_repository
        self.swap_repository = swap_repository
        self.notification_repository = notification_repository

    async def get_by_id(self, account_id: AccountId) -> Account:
        """Get account by ID.

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.get_by_id", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("User", str(account_id))
            return account

    async def get_actor(self, account_id: AccountId) -> Actor:
        """Resolve the caller of an operation from a token subject.

        Raises:
            AuthenticationError: If the account no longer exists
        """
        account = await self.account_repository.find_by_id(account_id)
        if account is None:
            logfire.warn("Token subject has no account", account_id=str(account_id))
            raise AuthenticationError("Not authorized, user not found")
        return Actor(id=account.id, name=account.name)

    async def get_many(self, account_ids: list[AccountId]) -> dict[AccountId, Account]:
        """Load several accounts keyed by ID; missing IDs are left out."""
        if not account_ids:
            return {}
        accounts = await self.account_repository.find_many(list(set(account_ids)))
        return {account.id: account for account in accounts}

    async def active_ids(
        self, account_ids: list[AccountId] | None = None
    ) -> list[AccountId]:
        """IDs of non-banned accounts, optionally restricted to ``account_ids``."""
        with logfire.span("account_service.active_ids", restricted=account_ids is not None):
            return await self.account_repository.find_active_ids(account_ids)

    async def find_by_email(self, email: EmailAddress) -> Account | None:
        with logfire.span("account_service.find_by_email", email=email.root):
            return await self.account_repository.find_by_email(email)

    async def create_account(self, name: str, email: EmailAddress) -> Account:
        """Create a new, public, unverified account.

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("account_service.create_account", email=email.root):
            if await self.account_repository.find_by_email(email):
                logfire.warn("Email already registered", email=email.root)
                raise ConflictError("User already exists with this email")

            account = Account(id=AccountId(uuid4()), name=name, email=email)
            saved = await self.account_repository.save(account)
            logfire.info("Account created", account_id=str(saved.id))
            return saved

    async def save(self, account: Account) -> Account:
        with logfire.span("account_service.save", account_id=str(account.id)):
            return await self.account_repository.save(account)

    async def view_profile(
        self, account_id: AccountId, viewer_id: AccountId | None = None
    ) -> Account:
        """Get a profile as seen by ``viewer_id``.

        Banned accounts are hidden. Private profiles are only visible to
        their owner.

        Raises:
            NotFoundError: If the account does not exist or is banned
            NotAuthorizedError: If the profile is private and the viewer is someone else
        """
        with logfire.span(
            "account_service.view_profile",
            account_id=str(account_id),
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            account = await self.account_repository.find_by_id(account_id)
            is_owner = viewer_id == account_id
            if account is None or (account.is_banned and not is_owner):
                raise NotFoundError("User", str(account_id))
            if not account.is_public and not is_owner:
                raise NotAuthorizedError(
                    "profile",
                    str(account_id),
                    str(viewer_id),
                    message="This profile is private",
                )
            return account

    async def update_profile(self, account_id: AccountId, **changes: Any) -> Account:
        """Apply owner-editable profile changes.

        Raises:
            NotFoundError: If account not found
            ValueError: If an unknown field is passed
        """
        unknown = set(changes) - PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        with logfire.span(
            "account_service.update_profile",
            account_id=str(account_id),
            fields=sorted(changes),
        ):
            account = await self.get_by_id(account_id)
            updated = Account.model_validate(
                {**account.model_dump(), **changes, "updated_at": utc_now()}
            )
            saved = await self.account_repository.save(updated)
            logfire.info("Profile updated", account_id=str(account_id))
            return saved

    async def set_profile_photo(
        self, account_id: AccountId, photo_url: str | None
    ) -> tuple[Account, str | None]:
        """Replace the profile photo URL.

        Returns:
            Tuple of (updated account, previous photo URL)
        """
        with logfire.span("account_service.set_profile_photo", account_id=str(account_id)):
            account = await self.get_by_id(account_id)
            previous = account.profile_photo
            updated = account.model_copy(
                update={"profile_photo": photo_url, "updated_at": utc_now()}
            )
            return await self.account_repository.save(updated), previous

    async def touch(self, account: Account) -> Account:
        """Stamp ``last_active``."""
        now = utc_now()
        return await self.account_repository.save(
            account.model_copy(update={"last_active": now})
        )

    async def moderate(
        self,
        account_id: AccountId,
        is_banned: bool | None = None,
        is_verified: bool | None = None,
        ban_reason: str | None = None,
    ) -> Account:
        """Change moderation flags.

        Unbanning clears the ban reason.
        """
        with logfire.span(
            "account_service.moderate",
            account_id=str(account_id),
            is_banned=is_banned,
            is_verified=is_verified,
        ):
            account = await self.get_by_id(account_id)
            update: dict[str, Any] = {"updated_at": utc_now()}
            if is_banned is not None:
                update["is_banned"] = is_banned
                update["ban_reason"] = ban_reason if is_banned else None
            if is_verified is not None:
                update["is_verified"] = is_verified
            saved = await self.account_repository.save(account.model_copy(update=update))
            logfire.info(
                "Account moderated",
                account_id=str(account_id),
                is_banned=saved.is_banned,
                is_verified=saved.is_verified,
            )
            return saved

    async def search(
        self, criteria: AccountSearch, page: PageRequest
    ) -> tuple[list[Account], int]:
        """Search the public directory.

        Returns:
            Tuple of (accounts on the page, total matches)
        """
        with logfire.span(
            "account_service.search", text=criteria.text, page=page.page, limit=page.limit
        ):
            accounts, total = await self.account_repository.search(criteria, page)
            logfire.info("Accounts searched", returned=len(accounts), total=total)
            return accounts, total

    async def list_accounts(
        self, listing: AccountListing, page: PageRequest
    ) -> tuple[list[Account], int]:
        with logfire.span("account_service.list_accounts", page=page.page):
            return await self.account_repository.list_accounts(listing, page)

    async def delete_account(self, account_id: AccountId) -> Account:
        """Delete an account and everything hanging off it.

        Removes swaps where the account is either party, notifications
        addressed to it, feedback it wrote on other accounts (through those
        accounts so their rating aggregates stay consistent), its credential
        and finally the account with the feedback it received.

        Returns:
            The deleted account

        Raises:
            NotFoundError: If account not found
        """
        with logfire.span("account_service.delete_account", account_id=str(account_id)):
            account = await self.get_by_id(account_id)

            swaps = await self.swap_repository.delete_involving(account_id)
            notifications = await self.notification_repository.delete_for_user(
                account_id
            )

            rated = await self.account_repository.find_rated_by(account_id)
            for other in rated:
                locked = await self.account_repository.find_by_id(other.id, for_update=True)
                if locked is not None:
                    await self.account_repository.save(
                        locked.remove_feedback_from(account_id)
                    )

            await self.credential_repository.delete(account_id)
            await self.account_repository.delete(account_id)
            logfire.info(
                "Account deleted",
                account_id=str(account_id),
                swaps_deleted=swaps,
                notifications_deleted=notifications,
                accounts_rerated=len(rated),
            )
            return account
