"""Admin feedback moderation use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ApiModel, FeedbackView, Pagination
from skillswap.domain.service import AdminService, FeedbackService
from skillswap.domain.value import AdminId, FeedbackId, PageRequest, Permission


class ListAllFeedbackRequest(BaseModel):
    admin_id: str
    min_stars: int | None = Field(default=None, ge=1, le=5)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ModeratedFeedbackView(FeedbackView):
    """Feedback entry with the account it was left on."""

    to_user: str


class FeedbackListResponse(ApiModel):
    feedback: list[ModeratedFeedbackView]
    pagination: Pagination


class RemoveFeedbackRequest(BaseModel):
    admin_id: str
    feedback_id: str


class ListAllFeedbackUseCase(BaseUseCase[ListAllFeedbackRequest, FeedbackListResponse]):
    """Use case for browsing all feedback, optionally from a star rating up."""

    def __init__(
        self, admin_service: AdminService, feedback_service: FeedbackService
    ) -> None:
        self.admin_service = admin_service
        self.feedback_service = feedback_service

    async def execute(self, request: ListAllFeedbackRequest) -> FeedbackListResponse:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_FEEDBACK
        )
        page = PageRequest(page=request.page, limit=request.limit)
        entries, total = await self.feedback_service.list_all(
            page, min_stars=request.min_stars
        )
        return FeedbackListResponse(
            feedback=[
                ModeratedFeedbackView(
                    **FeedbackView.from_feedback(entry).model_dump(),
                    to_user=str(account_id),
                )
                for account_id, entry in entries
            ],
            pagination=Pagination.of(page, total),
        )


class RemoveFeedbackUseCase(BaseUseCase[RemoveFeedbackRequest, None]):
    """Use case for deleting feedback outright; the rating is recomputed."""

    def __init__(
        self, admin_service: AdminService, feedback_service: FeedbackService
    ) -> None:
        self.admin_service = admin_service
        self.feedback_service = feedback_service

    async def execute(self, request: RemoveFeedbackRequest) -> None:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.MANAGE_FEEDBACK
        )
        await self.feedback_service.remove_feedback(FeedbackId(UUID(request.feedback_id)))
