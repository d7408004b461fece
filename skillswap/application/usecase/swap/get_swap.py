"""Get swap request use case."""

from uuid import UUID

from pydantic import BaseModel

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import SwapView, swap_views
from skillswap.domain.service import AccountService, SwapService
from skillswap.domain.value import AccountId, SwapId


class GetSwapRequest(BaseModel):
    """Get swap request."""

    account_id: str
    swap_id: str


class GetSwapUseCase(BaseUseCase[GetSwapRequest, SwapView]):
    """Use case for viewing one swap request the caller takes part in."""

    def __init__(
        self, account_service: AccountService, swap_service: SwapService
    ) -> None:
        self.account_service = account_service
        self.swap_service = swap_service

    async def execute(self, request: GetSwapRequest) -> SwapView:
        """Get a swap request.

        Raises:
            NotFoundError: If the swap request does not exist
            NotAuthorizedError: If the caller is not a party
        """
        swap = await self.swap_service.get_swap_for(
            SwapId(UUID(request.swap_id)), AccountId(UUID(request.account_id))
        )
        [view] = await swap_views(self.account_service, [swap])
        return view
