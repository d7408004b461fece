"""Update and delete feedback use cases."""

from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import FeedbackView
from skillswap.domain.service import AccountService, FeedbackService
from skillswap.domain.value import AccountId, FeedbackId


class UpdateFeedbackRequest(BaseModel):
    """Update feedback request."""

    account_id: str
    feedback_id: str
    stars: int | None = Field(default=None, ge=1, le=5)
    comment: str | None = Field(default=None, min_length=1, max_length=500)

    @model_validator(mode="after")
    def require_change(self) -> "UpdateFeedbackRequest":
        if self.stars is None and self.comment is None:
            raise ValueError("Provide stars or comment to update")
        return self


class DeleteFeedbackRequest(BaseModel):
    account_id: str
    feedback_id: str


class UpdateFeedbackUseCase(BaseUseCase[UpdateFeedbackRequest, FeedbackView]):
    """Use case for the author revising their feedback within the edit window.

    The rated account's aggregate is corrected by the star difference.
    """

    def __init__(
        self, account_service: AccountService, feedback_service: FeedbackService
    ) -> None:
        self.account_service = account_service
        self.feedback_service = feedback_service

    async def execute(self, request: UpdateFeedbackRequest) -> FeedbackView:
        """Execute update feedback flow.

        Raises:
            NotFoundError: If the feedback does not exist
            NotAuthorizedError: If the caller did not write it
            InvalidStateError: If the edit window has passed
        """
        actor = await self.account_service.get_actor(AccountId(UUID(request.account_id)))
        entry = await self.feedback_service.update_feedback(
            FeedbackId(UUID(request.feedback_id)),
            actor,
            stars=request.stars,
            comment=request.comment.strip() if request.comment else None,
        )
        return FeedbackView.from_feedback(entry)


class DeleteFeedbackUseCase(BaseUseCase[DeleteFeedbackRequest, None]):
    """Use case for the author withdrawing their feedback within the edit window."""

    def __init__(
        self, account_service: AccountService, feedback_service: FeedbackService
    ) -> None:
        self.account_service = account_service
        self.feedback_service = feedback_service

    async def execute(self, request: DeleteFeedbackRequest) -> None:
        actor = await self.account_service.get_actor(AccountId(UUID(request.account_id)))
        await self.feedback_service.delete_feedback(
            FeedbackId(UUID(request.feedback_id)), actor
        )
