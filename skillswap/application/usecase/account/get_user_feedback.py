"""Get user feedback use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ApiModel, FeedbackView, Pagination
from skillswap.domain.service import FeedbackService
from skillswap.domain.value import AccountId, PageRequest


class GetUserFeedbackRequest(BaseModel):
    """Get user feedback request."""

    account_id: str
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=50)


class GetUserFeedbackResponse(ApiModel):
    """Feedback an account has received, newest first."""

    feedback: list[FeedbackView]
    average_rating: float
    total_ratings: int
    pagination: Pagination


class GetUserFeedbackUseCase(
    BaseUseCase[GetUserFeedbackRequest, GetUserFeedbackResponse]
):
    """Use case for paging through an account's received feedback."""

    def __init__(self, feedback_service: FeedbackService) -> None:
        self.feedback_service = feedback_service

    async def execute(self, request: GetUserFeedbackRequest) -> GetUserFeedbackResponse:
        page = PageRequest(page=request.page, limit=request.limit)
        received = await self.feedback_service.received_feedback(
            AccountId(UUID(request.account_id)), page
        )
        return GetUserFeedbackResponse(
            feedback=[FeedbackView.from_feedback(entry) for entry in received.entries],
            average_rating=received.account.average_rating,
            total_ratings=received.total,
            pagination=Pagination.of(page, received.total),
        )
