"""Swap statistics use case."""

from uuid import UUID

from pydantic import BaseModel

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ApiModel
from skillswap.domain.service import SwapService
from skillswap.domain.value import AccountId, SwapStatus


class GetSwapStatsRequest(BaseModel):
    account_id: str


class SwapStatsResponse(ApiModel):
    """Per-status counts of an account's swaps."""

    pending: int
    accepted: int
    rejected: int
    cancelled: int
    completed: int
    total: int

    @classmethod
    def from_counts(cls, counts: dict[SwapStatus, int]) -> "SwapStatsResponse":
        by_status = {status.value: counts.get(status, 0) for status in SwapStatus}
        return cls(**by_status, total=sum(by_status.values()))


class GetSwapStatsUseCase(BaseUseCase[GetSwapStatsRequest, SwapStatsResponse]):
    """Use case for the caller's swap counters."""

    def __init__(self, swap_service: SwapService) -> None:
        self.swap_service = swap_service

    async def execute(self, request: GetSwapStatsRequest) -> SwapStatsResponse:
        counts = await self.swap_service.stats_for(AccountId(UUID(request.account_id)))
        return SwapStatsResponse.from_counts(counts)
