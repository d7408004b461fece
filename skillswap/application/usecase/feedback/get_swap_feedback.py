"""Get swap feedback use case."""

from uuid import UUID

from pydantic import BaseModel

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ApiModel, FeedbackView
from skillswap.domain.service import FeedbackService
from skillswap.domain.value import AccountId, FeedbackDirection, SwapId


class GetSwapFeedbackRequest(BaseModel):
    account_id: str
    swap_id: str


class SwapFeedbackItem(ApiModel):
    """Feedback one party left the other."""

    direction: FeedbackDirection
    rated_user: str
    feedback: FeedbackView


class SwapFeedbackResponse(ApiModel):
    feedback: list[SwapFeedbackItem]


class GetSwapFeedbackUseCase(BaseUseCase[GetSwapFeedbackRequest, SwapFeedbackResponse]):
    """Use case for the feedback both parties left on a swap."""

    def __init__(self, feedback_service: FeedbackService) -> None:
        self.feedback_service = feedback_service

    async def execute(self, request: GetSwapFeedbackRequest) -> SwapFeedbackResponse:
        entries = await self.feedback_service.feedback_for_swap(
            SwapId(UUID(request.swap_id)), AccountId(UUID(request.account_id))
        )
        return SwapFeedbackResponse(
            feedback=[
                SwapFeedbackItem(
                    direction=entry.direction,
                    rated_user=str(entry.rated_account_id),
                    feedback=FeedbackView.from_feedback(entry.feedback),
                )
                for entry in entries
            ]
        )
