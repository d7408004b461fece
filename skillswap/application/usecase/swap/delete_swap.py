"""Delete swap request use case."""

from uuid import UUID

from pydantic import BaseModel

from skillswap.application.usecase.base import BaseUseCase
from skillswap.domain.service import AccountService, SwapService
from skillswap.domain.value import AccountId, SwapId


class DeleteSwapRequest(BaseModel):
    account_id: str
    swap_id: str


class DeleteSwapUseCase(BaseUseCase[DeleteSwapRequest, None]):
    """Use case for the requester removing a pending or cancelled request."""

    def __init__(
        self, account_service: AccountService, swap_service: SwapService
    ) -> None:
        self.account_service = account_service
        self.swap_service = swap_service

    async def execute(self, request: DeleteSwapRequest) -> None:
        actor = await self.account_service.get_actor(AccountId(UUID(request.account_id)))
        await self.swap_service.delete_swap(SwapId(UUID(request.swap_id)), actor)
