"""Swap request domain service."""

from enum import Enum
from uuid import uuid4

import logfire

from skillswap.domain.error import (
    ConflictError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from skillswap.domain.model import SwapRequest
from skillswap.domain.repository import AccountRepository, SwapRequestRepository
from skillswap.domain.value import (
    AccountId,
    Actor,
    NotificationType,
    PageRequest,
    SwapBox,
    SwapId,
    SwapStatus,
)

from .base import Service
from .mail_service import MailService
from .notification_service import NotificationService


class _Party(Enum):
    """Which side of a swap may perform a transition."""

    REQUESTER = "requester"
    RECIPIENT = "recipient"
    EITHER = "either"


def _with_reason(message: str, reason: str | None) -> str:
    return f"{message}: {reason}" if reason else message


class SwapService(Service):
    """Domain service owning the swap request lifecycle.

    Every transition is checked in this order: the swap exists, the caller
    has standing, the lifecycle allows the move, and finally the stored
    status still matches what was read (conditional write).
    """

    def __init__(
        self,
        swap_repository: SwapRequestRepository,
        account_repository: AccountRepository,
        notification_service: NotificationService,
        mail_service: MailService,
    ) -> None:
        """Initialize swap service.

        Args:
            swap_repository: Swap request repository
            account_repository: Account repository (target checks)
            notification_service: Notification fan-out
            mail_service: Transactional email
        """
        self.swap_repository = swap_repository
        self.account_repository = account_repository
        self.notification_service = notification_service
        self.mail_service = mail_service

    async def create_swap(
        self,
        actor: Actor,
        to_account_id: AccountId,
        skills_offered: list[str],
        skills_requested: list[str],
        message: str,
    ) -> SwapRequest:
        """Open a swap request from ``actor`` to another account.

        Raises:
            ValidationError: If the actor targets themselves
            NotFoundError: If the target account does not exist
            NotAuthorizedError: If the target is private or banned
            ConflictError: If a pending request to the same account already exists
        """
        with logfire.span(
            "swap_service.create_swap",
            from_account_id=str(actor.id),
            to_account_id=str(to_account_id),
        ):
            if actor.id == to_account_id:
                raise ValidationError("Cannot send swap request to yourself")

            target = await self.account_repository.find_by_id(to_account_id)
            if target is None:
                logfire.warn("Swap target not found", to_account_id=str(to_account_id))
                raise NotFoundError("Target user", str(to_account_id))
            if not target.is_public:
                raise NotAuthorizedError(
                    "account",
                    str(to_account_id),
                    str(actor.id),
                    message="Cannot send swap request to private profile",
                )
            if target.is_banned:
                raise NotAuthorizedError(
                    "account",
                    str(to_account_id),
                    str(actor.id),
                    message="Cannot send swap request to banned user",
                )

            if await self.swap_repository.exists_pending(actor.id, to_account_id):
                raise ConflictError(
                    "You already have a pending swap request with this user"
                )

            swap = SwapRequest(
                id=SwapId(uuid4()),
                from_account_id=actor.id,
                to_account_id=to_account_id,
                skills_offered=skills_offered,
                skills_requested=skills_requested,
                message=message,
            )
            saved = await self.swap_repository.create(swap)
            logfire.info(
                "Swap request created",
                swap_id=str(saved.id),
                from_account_id=str(actor.id),
                to_account_id=str(to_account_id),
            )

            await self.notification_service.notify(
                user_id=to_account_id,
                type=NotificationType.SWAP_REQUEST,
                message=f"{actor.name} wants to swap skills with you",
                related_account_id=actor.id,
                related_swap_id=saved.id,
            )
            self.mail_service.send_swap_request(target, actor.name, saved)
            return saved

    async def get_swap(self, swap_id: SwapId) -> SwapRequest:
        """Get swap request by ID.

        Raises:
            NotFoundError: If swap request not found
        """
        swap = await self.swap_repository.find_by_id(swap_id)
        if swap is None:
            raise NotFoundError("Swap request", str(swap_id))
        return swap

    async def get_swap_for(self, swap_id: SwapId, account_id: AccountId) -> SwapRequest:
        """Get a swap request the caller is a party to.

        Raises:
            NotFoundError: If swap request not found
            NotAuthorizedError: If the caller is not a party
        """
        with logfire.span(
            "swap_service.get_swap_for", swap_id=str(swap_id), account_id=str(account_id)
        ):
            swap = await self.get_swap(swap_id)
            if not swap.involves(account_id):
                raise NotAuthorizedError(
                    "swap request", str(swap_id), str(account_id), action="view"
                )
            return swap

    async def accept(self, swap_id: SwapId, actor: Actor) -> SwapRequest:
        """Recipient accepts a pending request."""
        swap = await self._transition(
            swap_id, actor, SwapStatus.ACCEPTED, _Party.RECIPIENT, "accept"
        )
        await self.notification_service.notify(
            user_id=swap.from_account_id,
            type=NotificationType.SWAP_ACCEPTED,
            message=f"{actor.name} accepted your swap request",
            related_account_id=actor.id,
            related_swap_id=swap.id,
        )
        return swap

    async def reject(
        self, swap_id: SwapId, actor: Actor, reason: str | None = None
    ) -> SwapRequest:
        """Recipient rejects a pending request, optionally with a reason."""
        swap = await self._transition(
            swap_id, actor, SwapStatus.REJECTED, _Party.RECIPIENT, "reject"
        )
        await self.notification_service.notify(
            user_id=swap.from_account_id,
            type=NotificationType.SWAP_REJECTED,
            message=_with_reason(f"{actor.name} rejected your swap request", reason),
            related_account_id=actor.id,
            related_swap_id=swap.id,
        )
        return swap

    async def cancel(
        self, swap_id: SwapId, actor: Actor, reason: str | None = None
    ) -> SwapRequest:
        """Requester withdraws a pending request, optionally with a reason."""
        swap = await self._transition(
            swap_id, actor, SwapStatus.CANCELLED, _Party.REQUESTER, "cancel"
        )
        await self.notification_service.notify(
            user_id=swap.to_account_id,
            type=NotificationType.SWAP_CANCELLED,
            message=_with_reason(f"{actor.name} cancelled their swap request", reason),
            related_account_id=actor.id,
            related_swap_id=swap.id,
        )
        return swap

    async def complete(self, swap_id: SwapId, actor: Actor) -> SwapRequest:
        """Either party marks an accepted swap as completed."""
        swap = await self._transition(
            swap_id, actor, SwapStatus.COMPLETED, _Party.EITHER, "complete"
        )
        await self.notification_service.notify(
            user_id=swap.counterpart_of(actor.id),
            type=NotificationType.SWAP_COMPLETED,
            message=f"{actor.name} marked the swap as completed",
            related_account_id=actor.id,
            related_swap_id=swap.id,
        )
        return swap

    async def delete_swap(self, swap_id: SwapId, actor: Actor) -> None:
        """Requester deletes a pending or cancelled request.

        Raises:
            NotFoundError: If swap request not found
            NotAuthorizedError: If the caller is not the requester
            InvalidStateError: If the swap has moved past pending/cancelled
        """
        with logfire.span(
            "swap_service.delete_swap", swap_id=str(swap_id), account_id=str(actor.id)
        ):
            swap = await self.get_swap(swap_id)
            if swap.from_account_id != actor.id:
                raise NotAuthorizedError(
                    "swap request", str(swap_id), str(actor.id), action="delete"
                )
            if not swap.is_deletable or not await self.swap_repository.delete_if_deletable(
                swap_id
            ):
                raise InvalidStateError("Cannot delete swap request in current status")
            logfire.info("Swap request deleted", swap_id=str(swap_id))

    async def remove_swap(self, swap_id: SwapId) -> None:
        """Delete a swap request regardless of status (moderation).

        Raises:
            NotFoundError: If swap request not found
        """
        with logfire.span("swap_service.remove_swap", swap_id=str(swap_id)):
            if not await self.swap_repository.delete(swap_id):
                raise NotFoundError("Swap request", str(swap_id))
            logfire.info("Swap request removed by moderation", swap_id=str(swap_id))

    async def list_swaps(
        self,
        account_id: AccountId,
        page: PageRequest,
        box: SwapBox = SwapBox.ALL,
        status: SwapStatus | None = None,
    ) -> tuple[list[SwapRequest], int]:
        with logfire.span(
            "swap_service.list_swaps",
            account_id=str(account_id),
            box=box.value,
            status=status.value if status else None,
        ):
            return await self.swap_repository.list_for_account(
                account_id, page, box=box, status=status
            )

    async def list_inbox(
        self, account_id: AccountId, page: PageRequest
    ) -> tuple[list[SwapRequest], int]:
        """Pending requests waiting for the caller's answer."""
        return await self.list_swaps(
            account_id, page, box=SwapBox.RECEIVED, status=SwapStatus.PENDING
        )

    async def list_all(
        self, page: PageRequest, status: SwapStatus | None = None
    ) -> tuple[list[SwapRequest], int]:
        with logfire.span("swap_service.list_all", page=page.page):
            return await self.swap_repository.list_all(page, status=status)

    async def stats_for(self, account_id: AccountId) -> dict[SwapStatus, int]:
        """Per-status counts of the swaps the account takes part in."""
        with logfire.span("swap_service.stats_for", account_id=str(account_id)):
            return await self.swap_repository.count_by_status(account_id)

    async def _transition(
        self,
        swap_id: SwapId,
        actor: Actor,
        target: SwapStatus,
        party: _Party,
        action: str,
    ) -> SwapRequest:
        with logfire.span(
            f"swap_service.{action}", swap_id=str(swap_id), account_id=str(actor.id)
        ):
            swap = await self.get_swap(swap_id)

            allowed = {
                _Party.REQUESTER: actor.id == swap.from_account_id,
                _Party.RECIPIENT: actor.id == swap.to_account_id,
                _Party.EITHER: swap.involves(actor.id),
            }[party]
            if not allowed:
                logfire.warn(
                    "Swap transition refused",
                    swap_id=str(swap_id),
                    account_id=str(actor.id),
                    action=action,
                )
                raise NotAuthorizedError(
                    "swap request", str(swap_id), str(actor.id), action=action
                )

            updated = swap.transition_to(target)
            stored = await self.swap_repository.update_if_status(
                updated, expected=swap.status
            )
            if stored is None:
                # Someone else changed the status between our read and write
                logfire.warn("Swap transition lost race", swap_id=str(swap_id))
                raise InvalidStateError(
                    f"Swap request is no longer {swap.status.value}"
                )

            logfire.info(
                "Swap request transitioned",
                swap_id=str(swap_id),
                from_status=swap.status.value,
                to_status=target.value,
            )
            return stored
