"""Admin swap moderation use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.swap.list_swaps import SwapListResponse
from skillswap.application.usecase.views import Pagination, SwapView, swap_views
from skillswap.domain.service import AccountService, AdminService, SwapService
from skillswap.domain.value import AdminId, PageRequest, Permission, SwapId, SwapStatus


class ListAllSwapsRequest(BaseModel):
    admin_id: str
    status: SwapStatus | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class AdminSwapRequest(BaseModel):
    admin_id: str
    swap_id: str


class ListAllSwapsUseCase(BaseUseCase[ListAllSwapsRequest, SwapListResponse]):
    """Use case for browsing every swap request on the platform."""

    def __init__(
        self,
        admin_service: AdminService,
        account_service: AccountService,
        swap_service: SwapService,
    ) -> None:
        self.admin_service = admin_service
        self.account_service = account_service
        self.swap_service = swap_service

    async def execute(self, request: ListAllSwapsRequest) -> SwapListResponse:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_SWAPS
        )
        page = PageRequest(page=request.page, limit=request.limit)
        swaps, total = await self.swap_service.list_all(page, status=request.status)
        return SwapListResponse(
            swaps=await swap_views(self.account_service, swaps),
            pagination=Pagination.of(page, total),
        )


class AdminGetSwapUseCase(BaseUseCase[AdminSwapRequest, SwapView]):
    def __init__(
        self,
        admin_service: AdminService,
        account_service: AccountService,
        swap_service: SwapService,
    ) -> None:
        self.admin_service = admin_service
        self.account_service = account_service
        self.swap_service = swap_service

    async def execute(self, request: AdminSwapRequest) -> SwapView:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_SWAPS
        )
        swap = await self.swap_service.get_swap(SwapId(UUID(request.swap_id)))
        [view] = await swap_views(self.account_service, [swap])
        return view


class AdminDeleteSwapUseCase(BaseUseCase[AdminSwapRequest, None]):
    """Use case for deleting a swap request in any status."""

    def __init__(self, admin_service: AdminService, swap_service: SwapService) -> None:
        self.admin_service = admin_service
        self.swap_service = swap_service

    async def execute(self, request: AdminSwapRequest) -> None:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_SWAPS
        )
        await self.swap_service.remove_swap(SwapId(UUID(request.swap_id)))
