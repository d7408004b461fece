"""Admin dashboard use case."""

from uuid import UUID

from pydantic import BaseModel

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import (
    AccountSummary,
    ApiModel,
    SwapView,
    swap_views,
)
from skillswap.domain.service import AccountService, AdminService, AnalyticsService
from skillswap.domain.value import AdminId, Permission


class AdminRequest(BaseModel):
    """Request carrying only the authenticated admin."""

    admin_id: str


class DashboardTotals(ApiModel):
    total_users: int
    active_users: int
    banned_users: int
    total_swaps: int
    pending_swaps: int
    completed_swaps: int
    total_notifications: int


class DashboardResponse(ApiModel):
    stats: DashboardTotals
    recent_users: list[AccountSummary]
    recent_swaps: list[SwapView]


class GetDashboardUseCase(BaseUseCase[AdminRequest, DashboardResponse]):
    """Use case for the admin landing page counters."""

    def __init__(
        self,
        admin_service: AdminService,
        analytics_service: AnalyticsService,
        account_service: AccountService,
    ) -> None:
        self.admin_service = admin_service
        self.analytics_service = analytics_service
        self.account_service = account_service

    async def execute(self, request: AdminRequest) -> DashboardResponse:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.VIEW_ANALYTICS
        )
        stats = await self.analytics_service.dashboard()
        return DashboardResponse(
            stats=DashboardTotals(
                total_users=stats.total_users,
                active_users=stats.active_users,
                banned_users=stats.banned_users,
                total_swaps=stats.total_swaps,
                pending_swaps=stats.pending_swaps,
                completed_swaps=stats.completed_swaps,
                total_notifications=stats.total_notifications,
            ),
            recent_users=[AccountSummary.from_account(a) for a in stats.recent_users],
            recent_swaps=await swap_views(self.account_service, stats.recent_swaps),
        )
