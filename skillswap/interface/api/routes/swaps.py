"""Swap request routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import Field

from skillswap.application.usecase.swap import (
    ChangeSwapStatusRequest,
    ChangeSwapStatusUseCase,
    CreateSwapRequest,
    CreateSwapUseCase,
    DeleteSwapRequest,
    DeleteSwapUseCase,
    GetSwapRequest,
    GetSwapStatsRequest,
    GetSwapStatsUseCase,
    GetSwapUseCase,
    ListInboxRequest,
    ListInboxUseCase,
    ListSwapsRequest,
    ListSwapsUseCase,
    SwapAction,
    SwapListResponse,
    SwapStatsResponse,
)
from skillswap.application.usecase.views import ApiModel, SwapView
from skillswap.domain.service import JWTService
from skillswap.domain.value import SwapBox, SwapStatus
from skillswap.interface.api.envelope import ApiResponse
from skillswap.interface.api.security import AuthToken, require_account_id

router = APIRouter(prefix="/swaps", tags=["swaps"], route_class=DishkaRoute)

TRANSITION_MESSAGES = {
    SwapAction.ACCEPT: "Swap request accepted",
    SwapAction.REJECT: "Swap request rejected",
    SwapAction.CANCEL: "Swap request cancelled",
    SwapAction.COMPLETE: "Swap marked as completed",
}


class CreateSwapAPIRequest(ApiModel):
    """API request for proposing a swap."""

    to_user_id: UUID
    skills_offered: list[str]
    skills_requested: list[str]
    message: str


class SwapReasonAPIRequest(ApiModel):
    reason: str | None = Field(default=None, max_length=500)


@router.post(
    "",
    response_model=ApiResponse[SwapView],
    status_code=status.HTTP_201_CREATED,
)
async def create_swap(
    request: CreateSwapAPIRequest,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    create_swap_use_case: FromDishka[CreateSwapUseCase],
) -> ApiResponse[SwapView]:
    """Send a swap request.

    Example:
        POST /api/swaps

        Request:
        {
            "toUserId": "123e4567-e89b-12d3-a456-426614174000",
            "skillsOffered": ["Guitar"],
            "skillsRequested": ["Spanish"],
            "message": "Guitar lessons for Spanish practice?"
        }
    """
    account_id = require_account_id(jwt_service, token)
    swap = await create_swap_use_case.execute(
        CreateSwapRequest(
            account_id=account_id,
            to_user_id=str(request.to_user_id),
            skills_offered=request.skills_offered,
            skills_requested=request.skills_requested,
            message=request.message,
        )
    )
    return ApiResponse(message="Swap request sent successfully", data=swap)


@router.get("", response_model=ApiResponse[SwapListResponse])
async def list_swaps(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    list_swaps_use_case: FromDishka[ListSwapsUseCase],
    box: SwapBox = Query(default=SwapBox.ALL, alias="type"),
    swap_status: SwapStatus | None = Query(default=None, alias="status"),
    page: int = 1,
    limit: int = 10,
) -> ApiResponse[SwapListResponse]:
    """List the caller's swaps (``type`` is all, sent or received)."""
    account_id = require_account_id(jwt_service, token)
    result = await list_swaps_use_case.execute(
        ListSwapsRequest(
            account_id=account_id, box=box, status=swap_status, page=page, limit=limit
        )
    )
    return ApiResponse(message="Swap requests retrieved", data=result)


@router.get("/inbox", response_model=ApiResponse[SwapListResponse])
async def inbox(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    list_inbox_use_case: FromDishka[ListInboxUseCase],
    page: int = 1,
    limit: int = 10,
) -> ApiResponse[SwapListResponse]:
    account_id = require_account_id(jwt_service, token)
    result = await list_inbox_use_case.execute(
        ListInboxRequest(account_id=account_id, page=page, limit=limit)
    )
    return ApiResponse(message="Inbox retrieved", data=result)


@router.get("/stats", response_model=ApiResponse[SwapStatsResponse])
async def stats(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_swap_stats_use_case: FromDishka[GetSwapStatsUseCase],
) -> ApiResponse[SwapStatsResponse]:
    account_id = require_account_id(jwt_service, token)
    result = await get_swap_stats_use_case.execute(
        GetSwapStatsRequest(account_id=account_id)
    )
    return ApiResponse(message="Swap statistics retrieved", data=result)


@router.get("/{swap_id}", response_model=ApiResponse[SwapView])
async def get_swap(
    swap_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_swap_use_case: FromDishka[GetSwapUseCase],
) -> ApiResponse[SwapView]:
    account_id = require_account_id(jwt_service, token)
    swap = await get_swap_use_case.execute(
        GetSwapRequest(account_id=account_id, swap_id=str(swap_id))
    )
    return ApiResponse(message="Swap request retrieved", data=swap)


async def _transition(
    action: SwapAction,
    swap_id: UUID,
    reason: str | None,
    token: str | None,
    jwt_service: JWTService,
    use_case: ChangeSwapStatusUseCase,
) -> ApiResponse[SwapView]:
    account_id = require_account_id(jwt_service, token)
    swap = await use_case.execute(
        ChangeSwapStatusRequest(
            account_id=account_id, swap_id=str(swap_id), action=action, reason=reason
        )
    )
    return ApiResponse(message=TRANSITION_MESSAGES[action], data=swap)


@router.put("/{swap_id}/accept", response_model=ApiResponse[SwapView])
async def accept_swap(
    swap_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    change_swap_status_use_case: FromDishka[ChangeSwapStatusUseCase],
) -> ApiResponse[SwapView]:
    """Accept a pending request (recipient only)."""
    return await _transition(
        SwapAction.ACCEPT, swap_id, None, token, jwt_service, change_swap_status_use_case
    )


@router.put("/{swap_id}/reject", response_model=ApiResponse[SwapView])
async def reject_swap(
    swap_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    change_swap_status_use_case: FromDishka[ChangeSwapStatusUseCase],
    request: SwapReasonAPIRequest | None = None,
) -> ApiResponse[SwapView]:
    """Reject a pending request (recipient only), optionally with a reason."""
    return await _transition(
        SwapAction.REJECT,
        swap_id,
        request.reason if request else None,
        token,
        jwt_service,
        change_swap_status_use_case,
    )


@router.put("/{swap_id}/cancel", response_model=ApiResponse[SwapView])
async def cancel_swap(
    swap_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    change_swap_status_use_case: FromDishka[ChangeSwapStatusUseCase],
    request: SwapReasonAPIRequest | None = None,
) -> ApiResponse[SwapView]:
    """Withdraw a pending request (requester only), optionally with a reason."""
    return await _transition(
        SwapAction.CANCEL,
        swap_id,
        request.reason if request else None,
        token,
        jwt_service,
        change_swap_status_use_case,
    )


@router.put("/{swap_id}/complete", response_model=ApiResponse[SwapView])
async def complete_swap(
    swap_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    change_swap_status_use_case: FromDishka[ChangeSwapStatusUseCase],
) -> ApiResponse[SwapView]:
    """Mark an accepted swap as completed (either party)."""
    return await _transition(
        SwapAction.COMPLETE,
        swap_id,
        None,
        token,
        jwt_service,
        change_swap_status_use_case,
    )


@router.delete("/{swap_id}", response_model=ApiResponse[None])
async def delete_swap(
    swap_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    delete_swap_use_case: FromDishka[DeleteSwapUseCase],
) -> ApiResponse[None]:
    """Delete a pending or cancelled request (requester only)."""
    account_id = require_account_id(jwt_service, token)
    await delete_swap_use_case.execute(
        DeleteSwapRequest(account_id=account_id, swap_id=str(swap_id))
    )
    return ApiResponse(message="Swap request deleted successfully")
