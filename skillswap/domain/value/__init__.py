"""Domain value objects for SkillSwap."""

from skillswap.domain.value.identifiers import (
    AccountId,
    AdminId,
    FeedbackId,
    NotificationId,
    SwapId,
)
from skillswap.domain.value.types import (
    AccountStatusFilter,
    Actor,
    AdminRole,
    Availability,
    EmailAddress,
    FeedbackDirection,
    FeedbackSubmitted,
    NotificationType,
    PageRequest,
    Permission,
    ReportKind,
    ReportPeriod,
    SkillName,
    SwapBox,
    SwapStatus,
)

__all__ = [
    # Identifiers
    "AccountId",
    "AdminId",
    "FeedbackId",
    "NotificationId",
    "SwapId",
    # Types
    "AccountStatusFilter",
    "Actor",
    "AdminRole",
    "Availability",
    "EmailAddress",
    "FeedbackDirection",
    "FeedbackSubmitted",
    "NotificationType",
    "PageRequest",
    "Permission",
    "ReportKind",
    "ReportPeriod",
    "SkillName",
    "SwapBox",
    "SwapStatus",
]
