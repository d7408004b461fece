"""Create swap request use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import SwapView, swap_views
from skillswap.domain.service import AccountService, SwapService
from skillswap.domain.value import AccountId, SkillName


class CreateSwapRequest(BaseModel):
    """Create swap request."""

    account_id: str  # From authenticated user
    to_user_id: str
    skills_offered: list[SkillName] = Field(min_length=1)
    skills_requested: list[SkillName] = Field(min_length=1)
    message: str = Field(min_length=1, max_length=1000)


class CreateSwapUseCase(BaseUseCase[CreateSwapRequest, SwapView]):
    """Use case for proposing a skill swap to another account."""

    def __init__(
        self, account_service: AccountService, swap_service: SwapService
    ) -> None:
        """Initialize create swap use case.

        Args:
            account_service: Account service (caller and party lookups)
            swap_service: Swap lifecycle service
        """
        self.account_service = account_service
        self.swap_service = swap_service

    async def execute(self, request: CreateSwapRequest) -> SwapView:
        """Execute create swap flow.

        Raises:
            ValidationError: If the caller targets themselves
            NotFoundError: If the target account does not exist
            NotAuthorizedError: If the target is private or banned
            ConflictError: If a pending request to the target already exists
        """
        with logfire.span(
            "create_swap.execute",
            account_id=request.account_id,
            to_user_id=request.to_user_id,
        ):
            actor = await self.account_service.get_actor(
                AccountId(UUID(request.account_id))
            )
            swap = await self.swap_service.create_swap(
                actor=actor,
                to_account_id=AccountId(UUID(request.to_user_id)),
                skills_offered=request.skills_offered,
                skills_requested=request.skills_requested,
                message=request.message.strip(),
            )
            [view] = await swap_views(self.account_service, [swap])
            return view
