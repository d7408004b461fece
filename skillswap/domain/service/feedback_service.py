"""Feedback and rating domain service."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from skillswap.config import FeedbackSettings
from skillswap.domain.error import (
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
)
from skillswap.domain.model import Account, Feedback, SwapRequest
from skillswap.domain.model.common import utc_now
from skillswap.domain.repository import AccountRepository, SwapRequestRepository
from skillswap.domain.value import (
    AccountId,
    Actor,
    FeedbackDirection,
    FeedbackId,
    NotificationType,
    PageRequest,
    SwapId,
    SwapStatus,
)

from .base import Service
from .mail_service import MailService
from .notification_service import NotificationService


@dataclass
class SwapFeedbackEntry:
    """Feedback left on a swap, tagged with the party that wrote it."""

    direction: FeedbackDirection
    rated_account_id: AccountId
    feedback: Feedback


@dataclass
class ReceivedFeedback:
    """A page of feedback an account has received."""

    account: Account
    entries: list[Feedback]
    total: int


class FeedbackService(Service):
    """Domain service for feedback submission, edits and listings.

    Feedback entries live on the rated account, so every mutation loads that
    account (locked for the rest of the transaction), changes it through the
    aggregate and saves it back together with its rating totals.
    """

    def __init__(
        self,
        swap_repository: SwapRequestRepository,
        account_repository: AccountRepository,
        notification_service: NotificationService,
        mail_service: MailService,
        settings: FeedbackSettings,
    ) -> None:
        """Initialize feedback service.

        Args:
            swap_repository: Swap request repository
            account_repository: Account repository
            notification_service: Notification fan-out
            mail_service: Transactional email
            settings: Feedback settings (edit window)
        """
        self.swap_repository = swap_repository
        self.account_repository = account_repository
        self.notification_service = notification_service
        self.mail_service = mail_service
        self.edit_window = timedelta(hours=settings.edit_window_hours)

    async def submit_feedback(
        self, swap_id: SwapId, actor: Actor, stars: int, comment: str
    ) -> Feedback:
        """Rate the other party of a completed swap.

        Raises:
            NotFoundError: If the swap or the rated account does not exist
            NotAuthorizedError: If the caller is not a party to the swap
            InvalidStateError: If the swap is not completed or the caller already rated it
        """
        with logfire.span(
            "feedback_service.submit_feedback",
            swap_id=str(swap_id),
            account_id=str(actor.id),
            stars=stars,
        ):
            swap = await self.swap_repository.find_by_id(swap_id)
            if swap is None:
                raise NotFoundError("Swap request", str(swap_id))

            direction = swap.direction_of(actor.id)
            if direction is None:
                raise NotAuthorizedError(
                    "swap request",
                    str(swap_id),
                    str(actor.id),
                    message="You are not part of this swap",
                )
            if swap.status is not SwapStatus.COMPLETED:
                raise InvalidStateError("Can only leave feedback for completed swaps")
            if swap.feedback_submitted.is_submitted(direction):
                raise InvalidStateError("You have already submitted feedback for this swap")

            target_id = swap.counterpart_of(actor.id)
            target = await self.account_repository.find_by_id(target_id, for_update=True)
            if target is None:
                raise NotFoundError("User", str(target_id))

            flipped = await self.swap_repository.mark_feedback_submitted(
                swap_id, direction
            )
            if flipped is None:
                logfire.warn("Concurrent feedback submission lost", swap_id=str(swap_id))
                raise InvalidStateError("You have already submitted feedback for this swap")

            entry = Feedback(
                id=FeedbackId(uuid4()),
                from_account_id=actor.id,
                from_name=actor.name,
                swap_id=swap_id,
                stars=stars,
                comment=comment,
            )
            rated = await self.account_repository.save(target.add_feedback(entry))
            logfire.info(
                "Feedback submitted",
                feedback_id=str(entry.id),
                swap_id=str(swap_id),
                target_id=str(target_id),
                rating_count=rated.rating_count,
            )

            plural = "" if stars == 1 else "s"
            await self.notification_service.notify(
                user_id=target_id,
                type=NotificationType.FEEDBACK_RECEIVED,
                message=f"{actor.name} left you {stars} star{plural} feedback",
                related_account_id=actor.id,
                related_swap_id=swap_id,
                data={"stars": stars, "feedbackId": str(entry.id)},
            )
            self.mail_service.send_feedback_received(rated, actor.name, entry)
            return entry

    async def update_feedback(
        self,
        feedback_id: FeedbackId,
        actor: Actor,
        stars: int | None = None,
        comment: str | None = None,
        now: datetime | None = None,
    ) -> Feedback:
        """Change a feedback entry the caller wrote, within the edit window.

        Raises:
            NotFoundError: If the entry does not exist
            NotAuthorizedError: If the caller did not write it
            InvalidStateError: If the edit window has passed
        """
        with logfire.span(
            "feedback_service.update_feedback",
            feedback_id=str(feedback_id),
            account_id=str(actor.id),
        ):
            account, entry = await self._editable_entry(feedback_id, actor, now, "edit")
            revised = account.revise_feedback(feedback_id, stars=stars, comment=comment)
            await self.account_repository.save(revised)
            logfire.info(
                "Feedback updated",
                feedback_id=str(feedback_id),
                old_stars=entry.stars,
                new_stars=stars if stars is not None else entry.stars,
            )
            return revised.find_feedback(feedback_id)  # type: ignore[return-value]

    async def delete_feedback(
        self, feedback_id: FeedbackId, actor: Actor, now: datetime | None = None
    ) -> None:
        """Withdraw a feedback entry the caller wrote, within the edit window.

        Raises:
            NotFoundError: If the entry does not exist
            NotAuthorizedError: If the caller did not write it
            InvalidStateError: If the edit window has passed
        """
        with logfire.span(
            "feedback_service.delete_feedback",
            feedback_id=str(feedback_id),
            account_id=str(actor.id),
        ):
            account, _ = await self._editable_entry(feedback_id, actor, now, "delete")
            await self.account_repository.save(account.remove_feedback(feedback_id))
            logfire.info("Feedback deleted", feedback_id=str(feedback_id))

    async def remove_feedback(self, feedback_id: FeedbackId) -> None:
        """Delete any feedback entry outright (moderation).

        Raises:
            NotFoundError: If the entry does not exist
        """
        with logfire.span("feedback_service.remove_feedback", feedback_id=str(feedback_id)):
            account = await self.account_repository.find_by_feedback_id(
                feedback_id, for_update=True
            )
            if account is None:
                raise NotFoundError("Feedback", str(feedback_id))
            await self.account_repository.save(account.remove_feedback(feedback_id))
            logfire.info(
                "Feedback removed by moderation",
                feedback_id=str(feedback_id),
                account_id=str(account.id),
            )

    async def feedback_for_swap(
        self, swap_id: SwapId, account_id: AccountId
    ) -> list[SwapFeedbackEntry]:
        """Feedback the two parties left about each other.

        Raises:
            NotFoundError: If the swap does not exist
            NotAuthorizedError: If the caller is not a party
        """
        with logfire.span(
            "feedback_service.feedback_for_swap",
            swap_id=str(swap_id),
            account_id=str(account_id),
        ):
            swap = await self.swap_repository.find_by_id(swap_id)
            if swap is None:
                raise NotFoundError("Swap request", str(swap_id))
            if not swap.involves(account_id):
                raise NotAuthorizedError(
                    "swap request", str(swap_id), str(account_id), action="view"
                )
            return await self._entries_between(swap)

    async def received_feedback(
        self, account_id: AccountId, page: PageRequest
    ) -> ReceivedFeedback:
        """A page of an account's received feedback, newest first.

        Raises:
            NotFoundError: If the account does not exist
        """
        with logfire.span(
            "feedback_service.received_feedback", account_id=str(account_id)
        ):
            account = await self.account_repository.find_by_id(account_id)
            if account is None:
                raise NotFoundError("User", str(account_id))
            ordered = account.recent_feedback(limit=account.rating_count)
            return ReceivedFeedback(
                account=account,
                entries=ordered[page.offset : page.offset + page.limit],
                total=account.rating_count,
            )

    async def pending_feedback(
        self, account_id: AccountId, page: PageRequest
    ) -> tuple[list[SwapRequest], int]:
        """Completed swaps the caller still owes feedback on."""
        with logfire.span(
            "feedback_service.pending_feedback", account_id=str(account_id)
        ):
            return await self.swap_repository.list_awaiting_feedback(account_id, page)

    async def list_all(
        self, page: PageRequest, min_stars: int | None = None
    ) -> tuple[list[tuple[AccountId, Feedback]], int]:
        with logfire.span("feedback_service.list_all", page=page.page):
            return await self.account_repository.list_feedback(page, min_stars=min_stars)

    async def _editable_entry(
        self,
        feedback_id: FeedbackId,
        actor: Actor,
        now: datetime | None,
        action: str,
    ) -> tuple[Account, Feedback]:
        account = await self.account_repository.find_by_feedback_id(
            feedback_id, for_update=True
        )
        entry = account.find_feedback(feedback_id) if account else None
        if account is None or entry is None:
            raise NotFoundError("Feedback", str(feedback_id))
        if entry.from_account_id != actor.id:
            raise NotAuthorizedError(
                "feedback", str(feedback_id), str(actor.id), action=action
            )
        if not entry.is_editable(now or utc_now(), self.edit_window):
            hours = int(self.edit_window.total_seconds() // 3600)
            raise InvalidStateError(
                f"Feedback can only be changed within {hours} hours of posting"
            )
        return account, entry

    async def _entries_between(self, swap: SwapRequest) -> list[SwapFeedbackEntry]:
        accounts = {
            account.id: account
            for account in await self.account_repository.find_many(
                [swap.from_account_id, swap.to_account_id]
            )
        }
        entries: list[SwapFeedbackEntry] = []
        recipient = accounts.get(swap.to_account_id)
        if recipient is not None:
            entries.extend(
                SwapFeedbackEntry(
                    direction=FeedbackDirection.FROM_USER,
                    rated_account_id=recipient.id,
                    feedback=entry,
                )
                for entry in recipient.feedback_from(swap.from_account_id)
            )
        requester = accounts.get(swap.from_account_id)
        if requester is not None:
            entries.extend(
                SwapFeedbackEntry(
                    direction=FeedbackDirection.TO_USER,
                    rated_account_id=requester.id,
                    feedback=entry,
                )
                for entry in requester.feedback_from(swap.to_account_id)
            )
        return entries
