"""Domain services."""

from .account_service import AccountService
from .admin_service import AdminService
from .after_commit import AfterCommit
from .analytics_service import (
    AnalyticsReport,
    AnalyticsService,
    DashboardStats,
    period_start,
)
from .auth_service import AuthService
from .base import Service
from .feedback_service import FeedbackService, ReceivedFeedback, SwapFeedbackEntry
from .jwt_service import JWTService
from .mail_service import EmailMessage, EmailSender, MailDispatcher, MailService
from .media import MediaStorage
from .notification_service import NotificationService
from .password import PasswordHasher
from .swap_service import SwapService

__all__ = [
    "AccountService",
    "AdminService",
    "AfterCommit",
    "AnalyticsReport",
    "AnalyticsService",
    "AuthService",
    "DashboardStats",
    "EmailMessage",
    "EmailSender",
    "FeedbackService",
    "JWTService",
    "MailDispatcher",
    "MailService",
    "MediaStorage",
    "NotificationService",
    "PasswordHasher",
    "ReceivedFeedback",
    "Service",
    "SwapFeedbackEntry",
    "SwapService",
    "period_start",
]
