"""Notification inbox routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from skillswap.application.usecase.notification import (
    DeleteNotificationRequest,
    DeleteNotificationsRequest,
    DeleteNotificationsResponse,
    DeleteNotificationsUseCase,
    DeleteNotificationUseCase,
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
    NotificationListResponse,
    UnreadCountResponse,
)
from skillswap.application.usecase.views import ApiModel
from skillswap.domain.service import JWTService
from skillswap.domain.value import NotificationType
from skillswap.interface.api.envelope import ApiResponse
from skillswap.interface.api.security import AuthToken, require_account_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class NotificationIdsAPIRequest(ApiModel):
    """Notification selection; omitted IDs mean every notification."""

    notification_ids: list[UUID] | None = None

    def ids(self) -> list[str] | None:
        if self.notification_ids is None:
            return None
        return [str(value) for value in self.notification_ids]


@router.get("", response_model=ApiResponse[NotificationListResponse])
async def list_notifications(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    notification_type: NotificationType | None = Query(default=None, alias="type"),
    unread: bool = False,
    page: int = 1,
    limit: int = 20,
) -> ApiResponse[NotificationListResponse]:
    """List the caller's notifications, newest first."""
    account_id = require_account_id(jwt_service, token)
    result = await list_notifications_use_case.execute(
        ListNotificationsRequest(
            account_id=account_id,
            type=notification_type,
            unread_only=unread,
            page=page,
            limit=limit,
        )
    )
    return ApiResponse(message="Notifications retrieved", data=result)


@router.get("/unread-count", response_model=ApiResponse[UnreadCountResponse])
async def unread_count(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
) -> ApiResponse[UnreadCountResponse]:
    account_id = require_account_id(jwt_service, token)
    result = await get_unread_count_use_case.execute(
        GetUnreadCountRequest(account_id=account_id)
    )
    return ApiResponse(message="Unread count retrieved", data=result)


@router.put("/read", response_model=ApiResponse[MarkReadResponse])
async def mark_read(
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    mark_read_use_case: FromDishka[MarkReadUseCase],
    request: NotificationIdsAPIRequest | None = None,
) -> ApiResponse[MarkReadResponse]:
    """Mark the given notifications read, or all of them without a body."""
    account_id = require_account_id(jwt_service, token)
    result = await mark_read_use_case.execute(
        MarkReadRequest(
            account_id=account_id,
            notification_ids=request.ids() if request else None,
        )
    )
    return ApiResponse(message="Notifications marked as read", data=result)


@router.delete("/{notification_id}", response_model=ApiResponse[None])
async def delete_notification(
    notification_id: UUID,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
) -> ApiResponse[None]:
    account_id = require_account_id(jwt_service, token)
    await delete_notification_use_case.execute(
        DeleteNotificationRequest(
            account_id=account_id, notification_id=str(notification_id)
        )
    )
    return ApiResponse(message="Notification deleted")


@router.delete("", response_model=ApiResponse[DeleteNotificationsResponse])
async def delete_notifications(
    request: NotificationIdsAPIRequest,
    token: AuthToken,
    jwt_service: FromDishka[JWTService],
    delete_notifications_use_case: FromDishka[DeleteNotificationsUseCase],
) -> ApiResponse[DeleteNotificationsResponse]:
    """Bulk delete by ID, all or nothing."""
    account_id = require_account_id(jwt_service, token)
    result = await delete_notifications_use_case.execute(
        DeleteNotificationsRequest(
            account_id=account_id,
            notification_ids=request.ids() or [],
        )
    )
    return ApiResponse(message="Notifications deleted", data=result)
