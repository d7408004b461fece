"""List swap requests use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import (
    ApiModel,
    Pagination,
    SwapView,
    swap_views,
)
from skillswap.domain.service import AccountService, SwapService
from skillswap.domain.value import AccountId, PageRequest, SwapBox, SwapStatus


class ListSwapsRequest(BaseModel):
    """List swaps request."""

    account_id: str
    box: SwapBox = SwapBox.ALL
    status: SwapStatus | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=20)


class ListInboxRequest(BaseModel):
    account_id: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=20)


class SwapListResponse(ApiModel):
    """A page of swap requests, newest first."""

    swaps: list[SwapView]
    pagination: Pagination


class ListSwapsUseCase(BaseUseCase[ListSwapsRequest, SwapListResponse]):
    """Use case for the caller's sent and received swap requests."""

    def __init__(
        self, account_service: AccountService, swap_service: SwapService
    ) -> None:
        self.account_service = account_service
        self.swap_service = swap_service

    async def execute(self, request: ListSwapsRequest) -> SwapListResponse:
        page = PageRequest(page=request.page, limit=request.limit)
        swaps, total = await self.swap_service.list_swaps(
            AccountId(UUID(request.account_id)),
            page,
            box=request.box,
            status=request.status,
        )
        return SwapListResponse(
            swaps=await swap_views(self.account_service, swaps),
            pagination=Pagination.of(page, total),
        )


class ListInboxUseCase(BaseUseCase[ListInboxRequest, SwapListResponse]):
    """Use case for pending requests waiting on the caller."""

    def __init__(
        self, account_service: AccountService, swap_service: SwapService
    ) -> None:
        self.account_service = account_service
        self.swap_service = swap_service

    async def execute(self, request: ListInboxRequest) -> SwapListResponse:
        page = PageRequest(page=request.page, limit=request.limit)
        swaps, total = await self.swap_service.list_inbox(
            AccountId(UUID(request.account_id)), page
        )
        return SwapListResponse(
            swaps=await swap_views(self.account_service, swaps),
            pagination=Pagination.of(page, total),
        )
