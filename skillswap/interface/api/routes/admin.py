"""Administration routes.

Admin tokens are returned in the login response body only and must be sent
as an ``Authorization: Bearer`` header. Every route except login requires one;
permission checks happen in the use cases.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status

from skillswap.application.usecase.admin import (
    AdminAuthResponse,
    AdminDeleteSwapUseCase,
    AdminGetSwapUseCase,
    AdminListResponse,
    AdminLoginRequest,
    AdminLoginUseCase,
    AdminRequest,
    AdminSwapRequest,
    AdminUserRequest,
    AnalyticsResponse,
    BroadcastRequest,
    BroadcastResponse,
    BroadcastUseCase,
    CreateAdminRequest,
    CreateAdminUseCase,
    DashboardResponse,
    DeleteAdminRequest,
    DeleteAdminUseCase,
    DeleteUserUseCase,
    FeedbackListResponse,
    GetAnalyticsRequest,
    GetAnalyticsUseCase,
    GetDashboardUseCase,
    GetReportRequest,
    GetReportUseCase,
    GetUserUseCase,
    ListAdminsUseCase,
    ListAllFeedbackRequest,
    ListAllFeedbackUseCase,
    ListAllSwapsRequest,
    ListAllSwapsUseCase,
    ListUsersRequest,
    ListUsersUseCase,
    RemoveFeedbackRequest,
    RemoveFeedbackUseCase,
    ReportResponse,
    UpdateAdminRequest,
    UpdateAdminUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserDetailResponse,
    UserListResponse,
)
from skillswap.application.usecase.swap import SwapListResponse
from skillswap.application.usecase.views import (
    AdminView,
    ApiModel,
    PrivateProfileView,
    SwapView,
)
from skillswap.domain.service import JWTService
from skillswap.domain.value import (
    AccountStatusFilter,
    AdminRole,
    NotificationType,
    Permission,
    ReportKind,
    ReportPeriod,
    SwapStatus,
)
from skillswap.interface.api.envelope import ApiResponse
from skillswap.interface.api.security import AuthToken, require_admin_id

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class AdminLoginAPIRequest(ApiModel):
    email: str
    password: str


class UpdateUserAPIRequest(ApiModel):
    is_banned: bool | None = None
    is_verified: bool | None = None
    ban_reason: str | None = None


class BroadcastAPIRequest(ApiModel):
    """API request for notifying many users at once.

    Example:
        {
            "type": "system",
            "title": "Maintenance",
            "message": "The service is down for maintenance on Sunday",
            "sendToAll": true
        }
    """

    type: NotificationType = NotificationType.ADMIN_MESSAGE
    title: str
    message: str
    send_to_all: bool = False
    user_ids: list[UUID] | None = None


class CreateAdminAPIRequest(ApiModel):
    name: str
    email: str
    password: str
    role: AdminRole = AdminRole.MODERATOR
    permissions: list[Permission] | None = None


class UpdateAdminAPIRequest(ApiModel):
    name: str | None = None
    role: AdminRole | None = None
    permissions: list[Permission] | None = None
    is_active: bool | None = None


@router.post("/login", response_model=ApiResponse[AdminAuthResponse])
async def admin_login(
    request: AdminLoginAPIRequest,
    admin_login_use_case: FromDishka[AdminLoginUseCase],
) -> ApiResponse[AdminAuthResponse]:
    """Log in as an admin.

    Repeated failures lock the admin out for a while (HTTP 423).
    """
    result = await admin_login_use_case.execute(
        AdminLoginRequest(email=request.email, password=request.password)
    )
    return ApiResponse(message="Admin login successful", data=result)


@router.get("/dashboard", response_model=ApiResponse[DashboardResponse])
async def dashboard(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_dashboard_use_case: FromDishka[GetDashboardUseCase],
) -> ApiResponse[DashboardResponse]:
    admin_id = require_admin_id(jwt_service, token)
    result = await get_dashboard_use_case.execute(AdminRequest(admin_id=admin_id))
    return ApiResponse(message="Dashboard data retrieved", data=result)


# Users


@router.get("/users", response_model=ApiResponse[UserListResponse])
async def list_users(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    list_users_use_case: FromDishka[ListUsersUseCase],
    search: str | None = None,
    account_status: AccountStatusFilter | None = Query(default=None, alias="status"),
    page: int = 1,
    limit: int = 20,
) -> ApiResponse[UserListResponse]:
    admin_id = require_admin_id(jwt_service, token)
    result = await list_users_use_case.execute(
        ListUsersRequest(
            admin_id=admin_id,
            search=search,
            status=account_status,
            page=page,
            limit=limit,
        )
    )
    return ApiResponse(message="Users retrieved", data=result)


@router.get("/users/{user_id}", response_model=ApiResponse[UserDetailResponse])
async def get_user(
    user_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_user_use_case: FromDishka[GetUserUseCase],
) -> ApiResponse[UserDetailResponse]:
    admin_id = require_admin_id(jwt_service, token)
    result = await get_user_use_case.execute(
        AdminUserRequest(admin_id=admin_id, user_id=str(user_id))
    )
    return ApiResponse(message="User retrieved", data=result)


@router.put("/users/{user_id}", response_model=ApiResponse[PrivateProfileView])
async def update_user(
    user_id: UUID,
    request: UpdateUserAPIRequest,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    update_user_use_case: FromDishka[UpdateUserUseCase],
) -> ApiResponse[PrivateProfileView]:
    """Ban, unban or verify an account."""
    admin_id = require_admin_id(jwt_service, token)
    user = await update_user_use_case.execute(
        UpdateUserRequest(
            admin_id=admin_id,
            user_id=str(user_id),
            is_banned=request.is_banned,
            is_verified=request.is_verified,
            ban_reason=request.ban_reason,
        )
    )
    return ApiResponse(message="User updated successfully", data=user)


@router.delete("/users/{user_id}", response_model=ApiResponse[None])
async def delete_user(
    user_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    delete_user_use_case: FromDishka[DeleteUserUseCase],
) -> ApiResponse[None]:
    admin_id = require_admin_id(jwt_service, token)
    await delete_user_use_case.execute(
        AdminUserRequest(admin_id=admin_id, user_id=str(user_id))
    )
    return ApiResponse(message="User deleted successfully")


# Swaps


@router.get("/swaps", response_model=ApiResponse[SwapListResponse])
async def list_swaps(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    list_all_swaps_use_case: FromDishka[ListAllSwapsUseCase],
    swap_status: SwapStatus | None = Query(default=None, alias="status"),
    page: int = 1,
    limit: int = 20,
) -> ApiResponse[SwapListResponse]:
    admin_id = require_admin_id(jwt_service, token)
    result = await list_all_swaps_use_case.execute(
        ListAllSwapsRequest(
            admin_id=admin_id, status=swap_status, page=page, limit=limit
        )
    )
    return ApiResponse(message="Swaps retrieved", data=result)


@router.get("/swaps/{swap_id}", response_model=ApiResponse[SwapView])
async def get_swap(
    swap_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    admin_get_swap_use_case: FromDishka[AdminGetSwapUseCase],
) -> ApiResponse[SwapView]:
    admin_id = require_admin_id(jwt_service, token)
    swap = await admin_get_swap_use_case.execute(
        AdminSwapRequest(admin_id=admin_id, swap_id=str(swap_id))
    )
    return ApiResponse(message="Swap retrieved", data=swap)


@router.delete("/swaps/{swap_id}", response_model=ApiResponse[None])
async def delete_swap(
    swap_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    admin_delete_swap_use_case: FromDishka[AdminDeleteSwapUseCase],
) -> ApiResponse[None]:
    """Delete a swap regardless of its status."""
    admin_id = require_admin_id(jwt_service, token)
    await admin_delete_swap_use_case.execute(
        AdminSwapRequest(admin_id=admin_id, swap_id=str(swap_id))
    )
    return ApiResponse(message="Swap deleted successfully")


# Feedback


@router.get("/feedback", response_model=ApiResponse[FeedbackListResponse])
async def list_feedback(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    list_all_feedback_use_case: FromDishka[ListAllFeedbackUseCase],
    min_stars: int | None = Query(default=None, alias="minStars"),
    page: int = 1,
    limit: int = 20,
) -> ApiResponse[FeedbackListResponse]:
    admin_id = require_admin_id(jwt_service, token)
    result = await list_all_feedback_use_case.execute(
        ListAllFeedbackRequest(
            admin_id=admin_id, min_stars=min_stars, page=page, limit=limit
        )
    )
    return ApiResponse(message="Feedback retrieved", data=result)


@router.delete("/feedback/{feedback_id}", response_model=ApiResponse[None])
async def remove_feedback(
    feedback_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    remove_feedback_use_case: FromDishka[RemoveFeedbackUseCase],
) -> ApiResponse[None]:
    admin_id = require_admin_id(jwt_service, token)
    await remove_feedback_use_case.execute(
        RemoveFeedbackRequest(admin_id=admin_id, feedback_id=str(feedback_id))
    )
    return ApiResponse(message="Feedback removed successfully")


# Notifications


@router.post("/notifications", response_model=ApiResponse[BroadcastResponse])
async def broadcast(
    request: BroadcastAPIRequest,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    broadcast_use_case: FromDishka[BroadcastUseCase],
) -> ApiResponse[BroadcastResponse]:
    admin_id = require_admin_id(jwt_service, token)
    result = await broadcast_use_case.execute(
        BroadcastRequest(
            admin_id=admin_id,
            type=request.type,
            title=request.title,
            message=request.message,
            send_to_all=request.send_to_all,
            user_ids=(
                [str(user_id) for user_id in request.user_ids]
                if request.user_ids is not None
                else None
            ),
        )
    )
    return ApiResponse(
        message=f"Notification sent to {result.sent_count} users", data=result
    )


# Analytics


@router.get("/analytics", response_model=ApiResponse[AnalyticsResponse])
async def analytics(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_analytics_use_case: FromDishka[GetAnalyticsUseCase],
    period: ReportPeriod = ReportPeriod.MONTH,
) -> ApiResponse[AnalyticsResponse]:
    admin_id = require_admin_id(jwt_service, token)
    result = await get_analytics_use_case.execute(
        GetAnalyticsRequest(admin_id=admin_id, period=period)
    )
    return ApiResponse(message="Analytics retrieved", data=result)


@router.get("/reports/{kind}", response_model=ApiResponse[ReportResponse])
async def report(
    kind: ReportKind,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_report_use_case: FromDishka[GetReportUseCase],
    page: int = 1,
    limit: int = 100,
) -> ApiResponse[ReportResponse]:
    """Export rows for users, swaps or feedback."""
    admin_id = require_admin_id(jwt_service, token)
    result = await get_report_use_case.execute(
        GetReportRequest(admin_id=admin_id, kind=kind, page=page, limit=limit)
    )
    return ApiResponse(message="Report generated", data=result)


# Admins


@router.get("/admins", response_model=ApiResponse[AdminListResponse])
async def list_admins(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    list_admins_use_case: FromDishka[ListAdminsUseCase],
) -> ApiResponse[AdminListResponse]:
    admin_id = require_admin_id(jwt_service, token)
    result = await list_admins_use_case.execute(AdminRequest(admin_id=admin_id))
    return ApiResponse(message="Admins retrieved", data=result)


@router.post(
    "/admins",
    response_model=ApiResponse[AdminView],
    status_code=status.HTTP_201_CREATED,
)
async def create_admin(
    request: CreateAdminAPIRequest,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    create_admin_use_case: FromDishka[CreateAdminUseCase],
) -> ApiResponse[AdminView]:
    admin_id = require_admin_id(jwt_service, token)
    admin = await create_admin_use_case.execute(
        CreateAdminRequest(
            admin_id=admin_id,
            name=request.name,
            email=request.email,
            password=request.password,
            role=request.role,
            permissions=request.permissions,
        )
    )
    return ApiResponse(message="Admin created successfully", data=admin)


@router.put("/admins/{target_id}", response_model=ApiResponse[AdminView])
async def update_admin(
    target_id: UUID,
    request: UpdateAdminAPIRequest,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    update_admin_use_case: FromDishka[UpdateAdminUseCase],
) -> ApiResponse[AdminView]:
    admin_id = require_admin_id(jwt_service, token)
    admin = await update_admin_use_case.execute(
        UpdateAdminRequest(
            admin_id=admin_id,
            target_id=str(target_id),
            name=request.name,
            role=request.role,
            permissions=request.permissions,
            is_active=request.is_active,
        )
    )
    return ApiResponse(message="Admin updated successfully", data=admin)


@router.delete("/admins/{target_id}", response_model=ApiResponse[None])
async def delete_admin(
    target_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    delete_admin_use_case: FromDishka[DeleteAdminUseCase],
) -> ApiResponse[None]:
    admin_id = require_admin_id(jwt_service, token)
    await delete_admin_use_case.execute(
        DeleteAdminRequest(admin_id=admin_id, target_id=str(target_id))
    )
    return ApiResponse(message="Admin deleted successfully")
