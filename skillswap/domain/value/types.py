"""Domain value objects for SkillSwap.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and small pieces of business logic.
"""

import re
from enum import Enum
from typing import Annotated

from pydantic import Field, StringConstraints, field_validator

from skillswap.domain.value.common import RootValueObject, ValueObject
from skillswap.domain.value.identifiers import AccountId

SkillName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)
]

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Availability(str, Enum):
    """How open an account currently is to new swaps."""

    AVAILABLE = "available"
    BUSY = "busy"
    UNAVAILABLE = "unavailable"


class SwapStatus(str, Enum):
    """Lifecycle status of a swap request."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class FeedbackDirection(str, Enum):
    """Which party of a swap left (or owes) feedback."""

    FROM_USER = "fromUser"
    TO_USER = "toUser"


class NotificationType(str, Enum):
    """Kinds of notification an account can receive."""

    SWAP_REQUEST = "swap_request"
    SWAP_ACCEPTED = "swap_accepted"
    SWAP_REJECTED = "swap_rejected"
    SWAP_CANCELLED = "swap_cancelled"
    SWAP_COMPLETED = "swap_completed"
    FEEDBACK_RECEIVED = "feedback_received"
    ADMIN_MESSAGE = "admin_message"
    SYSTEM = "system"


class AdminRole(str, Enum):
    """Administrative roles."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    MODERATOR = "moderator"


class Permission(str, Enum):
    """Capabilities an admin may hold."""

    MANAGE_USERS = "manage_users"
    MANAGE_SWAPS = "manage_swaps"
    MANAGE_FEEDBACK = "manage_feedback"
    VIEW_ANALYTICS = "view_analytics"
    SEND_NOTIFICATIONS = "send_notifications"
    MANAGE_ADMINS = "manage_admins"
    VIEW_REPORTS = "view_reports"
    BAN_USERS = "ban_users"
    DELETE_CONTENT = "delete_content"


class SwapBox(str, Enum):
    """Which side of the caller's swaps to list."""

    ALL = "all"
    SENT = "sent"
    RECEIVED = "received"


class AccountStatusFilter(str, Enum):
    """Moderation status filter for admin account listings."""

    ACTIVE = "active"
    BANNED = "banned"
    UNVERIFIED = "unverified"


class ReportPeriod(str, Enum):
    """Time window for analytics, anchored to the current moment."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class ReportKind(str, Enum):
    """Row sets an admin can export."""

    USERS = "users"
    SWAPS = "swaps"
    FEEDBACK = "feedback"


class EmailAddress(RootValueObject[str]):
    """Normalized (trimmed, lowercase) email address."""

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate the address has a local part, an @ and a dotted domain."""
        if len(v) > 255 or not _EMAIL_PATTERN.match(v):
            raise ValueError("Please enter a valid email")
        return v


class FeedbackSubmitted(ValueObject):
    """Per-direction record of whether each swap party has left feedback."""

    from_user: bool = False
    to_user: bool = False

    def is_submitted(self, direction: FeedbackDirection) -> bool:
        if direction is FeedbackDirection.FROM_USER:
            return self.from_user
        return self.to_user

    def mark(self, direction: FeedbackDirection) -> "FeedbackSubmitted":
        if direction is FeedbackDirection.FROM_USER:
            return self.model_copy(update={"from_user": True})
        return self.model_copy(update={"to_user": True})


class Actor(ValueObject):
    """Authenticated account performing an operation."""

    id: AccountId
    name: str


class PageRequest(ValueObject):
    """One-based page number and page size."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def pages_for(self, total: int) -> int:
        """Number of pages needed to show ``total`` items."""
        return (total + self.limit - 1) // self.limit
