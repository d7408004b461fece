"""Feedback routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from skillswap.application.usecase.feedback import (
    DeleteFeedbackRequest,
    DeleteFeedbackUseCase,
    GetPendingFeedbackRequest,
    GetPendingFeedbackUseCase,
    GetSwapFeedbackRequest,
    GetSwapFeedbackUseCase,
    PendingFeedbackResponse,
    SubmitFeedbackRequest,
    SubmitFeedbackUseCase,
    SwapFeedbackResponse,
    UpdateFeedbackRequest,
    UpdateFeedbackUseCase,
)
from skillswap.application.usecase.views import ApiModel, FeedbackView
from skillswap.domain.service import JWTService
from skillswap.interface.api.envelope import ApiResponse
from skillswap.interface.api.security import AuthToken, require_account_id

router = APIRouter(prefix="/feedback", tags=["feedback"], route_class=DishkaRoute)


class SubmitFeedbackAPIRequest(ApiModel):
    swap_id: UUID
    stars: int
    comment: str


class UpdateFeedbackAPIRequest(ApiModel):
    stars: int | None = None
    comment: str | None = None


@router.post(
    "",
    response_model=ApiResponse[FeedbackView],
    status_code=status.HTTP_201_CREATED,
)
async def submit_feedback(
    request: SubmitFeedbackAPIRequest,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    submit_feedback_use_case: FromDishka[SubmitFeedbackUseCase],
) -> ApiResponse[FeedbackView]:
    """Rate the other party of a completed swap.

    Example:
        POST /api/feedback

        Request:
        {
            "swapId": "123e4567-e89b-12d3-a456-426614174000",
            "stars": 5,
            "comment": "Patient and well prepared"
        }
    """
    account_id = require_account_id(jwt_service, token)
    feedback = await submit_feedback_use_case.execute(
        SubmitFeedbackRequest(
            account_id=account_id,
            swap_id=str(request.swap_id),
            stars=request.stars,
            comment=request.comment,
        )
    )
    return ApiResponse(message="Feedback submitted successfully", data=feedback)


@router.get("/pending", response_model=ApiResponse[PendingFeedbackResponse])
async def pending_feedback(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_pending_feedback_use_case: FromDishka[GetPendingFeedbackUseCase],
    page: int = 1,
    limit: int = 10,
) -> ApiResponse[PendingFeedbackResponse]:
    """Completed swaps the caller has not rated yet."""
    account_id = require_account_id(jwt_service, token)
    result = await get_pending_feedback_use_case.execute(
        GetPendingFeedbackRequest(account_id=account_id, page=page, limit=limit)
    )
    return ApiResponse(message="Pending feedback retrieved", data=result)


@router.get("/swap/{swap_id}", response_model=ApiResponse[SwapFeedbackResponse])
async def swap_feedback(
    swap_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_swap_feedback_use_case: FromDishka[GetSwapFeedbackUseCase],
) -> ApiResponse[SwapFeedbackResponse]:
    account_id = require_account_id(jwt_service, token)
    result = await get_swap_feedback_use_case.execute(
        GetSwapFeedbackRequest(account_id=account_id, swap_id=str(swap_id))
    )
    return ApiResponse(message="Swap feedback retrieved", data=result)


@router.put("/{feedback_id}", response_model=ApiResponse[FeedbackView])
async def update_feedback(
    feedback_id: UUID,
    request: UpdateFeedbackAPIRequest,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    update_feedback_use_case: FromDishka[UpdateFeedbackUseCase],
) -> ApiResponse[FeedbackView]:
    """Edit feedback the caller wrote, within 24 hours of writing it."""
    account_id = require_account_id(jwt_service, token)
    feedback = await update_feedback_use_case.execute(
        UpdateFeedbackRequest(
            account_id=account_id,
            feedback_id=str(feedback_id),
            stars=request.stars,
            comment=request.comment,
        )
    )
    return ApiResponse(message="Feedback updated successfully", data=feedback)


@router.delete("/{feedback_id}", response_model=ApiResponse[None])
async def delete_feedback(
    feedback_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    delete_feedback_use_case: FromDishka[DeleteFeedbackUseCase],
) -> ApiResponse[None]:
    account_id = require_account_id(jwt_service, token)
    await delete_feedback_use_case.execute(
        DeleteFeedbackRequest(account_id=account_id, feedback_id=str(feedback_id))
    )
    return ApiResponse(message="Feedback deleted successfully")
