"""Notification use cases."""

from .delete_notifications import (
    DeleteNotificationRequest,
    DeleteNotificationsRequest,
    DeleteNotificationsResponse,
    DeleteNotificationsUseCase,
    DeleteNotificationUseCase,
)
from .list_notifications import (
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsUseCase,
    NotificationListResponse,
    UnreadCountResponse,
)
from .mark_read import MarkReadRequest, MarkReadResponse, MarkReadUseCase

__all__ = [
    "DeleteNotificationRequest",
    "DeleteNotificationUseCase",
    "DeleteNotificationsRequest",
    "DeleteNotificationsResponse",
    "DeleteNotificationsUseCase",
    "GetUnreadCountRequest",
    "GetUnreadCountUseCase",
    "ListNotificationsRequest",
    "ListNotificationsUseCase",
    "MarkReadRequest",
    "MarkReadResponse",
    "MarkReadUseCase",
    "NotificationListResponse",
    "UnreadCountResponse",
]
