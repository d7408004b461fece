"""Domain model entities for SkillSwap."""

from skillswap.domain.model.account import Account
from skillswap.domain.model.admin import (
    ROLE_DEFAULT_PERMISSIONS,
    Admin,
    AdminAccess,
    ScopedAccess,
    SuperAdminAccess,
)
from skillswap.domain.model.credential import AccountCredential
from skillswap.domain.model.feedback import Feedback
from skillswap.domain.model.notification import Notification, default_title
from skillswap.domain.model.swap import (
    DELETABLE_STATUSES,
    SWAP_TRANSITIONS,
    SwapRequest,
    ensure_transition,
)

__all__ = [
    "Account",
    "AccountCredential",
    "Admin",
    "AdminAccess",
    "DELETABLE_STATUSES",
    "Feedback",
    "Notification",
    "ROLE_DEFAULT_PERMISSIONS",
    "SWAP_TRANSITIONS",
    "ScopedAccess",
    "SuperAdminAccess",
    "SwapRequest",
    "default_title",
    "ensure_transition",
]
