"""Get pending feedback use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import (
    ApiModel,
    Pagination,
    SwapView,
    swap_views,
)
from skillswap.domain.service import AccountService, FeedbackService
from skillswap.domain.value import AccountId, PageRequest


class GetPendingFeedbackRequest(BaseModel):
    account_id: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=50)


class PendingFeedbackResponse(ApiModel):
    """Completed swaps the caller has not rated yet."""

    swaps: list[SwapView]
    pagination: Pagination


class GetPendingFeedbackUseCase(
    BaseUseCase[GetPendingFeedbackRequest, PendingFeedbackResponse]
):
    """Use case for listing swaps still awaiting the caller's feedback."""

    def __init__(
        self, account_service: AccountService, feedback_service: FeedbackService
    ) -> None:
        self.account_service = account_service
        self.feedback_service = feedback_service

    async def execute(
        self, request: GetPendingFeedbackRequest
    ) -> PendingFeedbackResponse:
        page = PageRequest(page=request.page, limit=request.limit)
        swaps, total = await self.feedback_service.pending_feedback(
            AccountId(UUID(request.account_id)), page
        )
        return PendingFeedbackResponse(
            swaps=await swap_views(self.account_service, swaps),
            pagination=Pagination.of(page, total),
        )
