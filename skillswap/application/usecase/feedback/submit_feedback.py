"""Submit feedback use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import FeedbackView
from skillswap.domain.service import AccountService, FeedbackService
from skillswap.domain.value import AccountId, SwapId


class SubmitFeedbackRequest(BaseModel):
    """Submit feedback request."""

    account_id: str  # From authenticated user
    swap_id: str
    stars: int = Field(ge=1, le=5)
    comment: str = Field(min_length=1, max_length=500)


class SubmitFeedbackUseCase(BaseUseCase[SubmitFeedbackRequest, FeedbackView]):
    """Use case for rating the other party of a completed swap.

    Each party may rate the other once per swap.
    """

    def __init__(
        self, account_service: AccountService, feedback_service: FeedbackService
    ) -> None:
        """Initialize submit feedback use case.

        Args:
            account_service: Account service (caller lookup)
            feedback_service: Feedback domain service
        """
        self.account_service = account_service
        self.feedback_service = feedback_service

    async def execute(self, request: SubmitFeedbackRequest) -> FeedbackView:
        """Execute submit feedback flow.

        Raises:
            NotFoundError: If the swap does not exist
            NotAuthorizedError: If the caller is not a party
            InvalidStateError: If the swap is not completed or already rated
        """
        with logfire.span(
            "submit_feedback.execute",
            swap_id=request.swap_id,
            stars=request.stars,
        ):
            actor = await self.account_service.get_actor(
                AccountId(UUID(request.account_id))
            )
            entry = await self.feedback_service.submit_feedback(
                SwapId(UUID(request.swap_id)),
                actor,
                stars=request.stars,
                comment=request.comment.strip(),
            )
            return FeedbackView.from_feedback(entry)
