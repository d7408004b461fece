"""Swap request transition use case."""

from enum import Enum
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import SwapView, swap_views
from skillswap.domain.service import AccountService, SwapService
from skillswap.domain.value import AccountId, SwapId


class SwapAction(str, Enum):
    """Transitions a party can request."""

    ACCEPT = "accept"
    REJECT = "reject"
    CANCEL = "cancel"
    COMPLETE = "complete"


class ChangeSwapStatusRequest(BaseModel):
    """Change swap status request."""

    account_id: str  # From authenticated user
    swap_id: str
    action: SwapAction
    reason: str | None = Field(default=None, max_length=500)  # Reject/cancel only


class ChangeSwapStatusUseCase(BaseUseCase[ChangeSwapStatusRequest, SwapView]):
    """Use case for accepting, rejecting, cancelling or completing a swap.

    Who may perform each action and from which status is decided by the
    swap service; this use case only resolves the caller and renders the
    result.
    """

    def __init__(
        self, account_service: AccountService, swap_service: SwapService
    ) -> None:
        """Initialize change swap status use case.

        Args:
            account_service: Account service (caller and party lookups)
            swap_service: Swap lifecycle service
        """
        self.account_service = account_service
        self.swap_service = swap_service

    async def execute(self, request: ChangeSwapStatusRequest) -> SwapView:
        """Execute the transition.

        Raises:
            NotFoundError: If the swap request does not exist
            NotAuthorizedError: If the caller may not perform the action
            InvalidStateError: If the swap is not in the required status
        """
        with logfire.span(
            "change_swap_status.execute",
            swap_id=request.swap_id,
            action=request.action.value,
        ):
            actor = await self.account_service.get_actor(
                AccountId(UUID(request.account_id))
            )
            swap_id = SwapId(UUID(request.swap_id))
            reason = (request.reason or "").strip() or None

            if request.action is SwapAction.ACCEPT:
                swap = await self.swap_service.accept(swap_id, actor)
            elif request.action is SwapAction.REJECT:
                swap = await self.swap_service.reject(swap_id, actor, reason=reason)
            elif request.action is SwapAction.CANCEL:
                swap = await self.swap_service.cancel(swap_id, actor, reason=reason)
            else:
                swap = await self.swap_service.complete(swap_id, actor)

            [view] = await swap_views(self.account_service, [swap])
            return view
