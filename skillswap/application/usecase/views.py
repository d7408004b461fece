"""Response views shared by use cases.

Views serialize with camelCase keys, the wire format web clients of the
service expect, and accept snake_case names when built in Python.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from skillswap.domain.model import Account, Admin, Feedback, Notification, SwapRequest
from skillswap.domain.service import AccountService
from skillswap.domain.value import (
    AdminRole,
    Availability,
    NotificationType,
    PageRequest,
    SwapStatus,
)


class ApiModel(BaseModel):
    """Base for models exchanged with API clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Pagination(ApiModel):
    """Page position within a listing."""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def of(cls, page: PageRequest, total: int) -> "Pagination":
        return cls(
            page=page.page,
            limit=page.limit,
            total=total,
            pages=page.pages_for(total),
        )


class FeedbackView(ApiModel):
    """A feedback entry as shown on profiles and swaps."""

    id: str
    from_user: str
    from_name: str
    swap_id: Optional[str]
    stars: int
    comment: str
    created_at: datetime

    @classmethod
    def from_feedback(cls, entry: Feedback) -> "FeedbackView":
        return cls(
            id=str(entry.id),
            from_user=str(entry.from_account_id),
            from_name=entry.from_name,
            swap_id=str(entry.swap_id) if entry.swap_id else None,
            stars=entry.stars,
            comment=entry.comment,
            created_at=entry.created_at,
        )


class AccountSummary(ApiModel):
    """Directory card for an account."""

    id: str
    name: str
    location: Optional[str]
    profile_photo: Optional[str]
    skills_offered: list[str]
    skills_wanted: list[str]
    availability: Availability
    average_rating: float
    rating_count: int
    is_verified: bool

    @classmethod
    def summary_fields(cls, account: Account) -> dict[str, Any]:
        return {
            "id": str(account.id),
            "name": account.name,
            "location": account.location,
            "profile_photo": account.profile_photo,
            "skills_offered": list(account.skills_offered),
            "skills_wanted": list(account.skills_wanted),
            "availability": account.availability,
            "average_rating": account.average_rating,
            "rating_count": account.rating_count,
            "is_verified": account.is_verified,
        }

    @classmethod
    def from_account(cls, account: Account) -> "AccountSummary":
        return cls(**cls.summary_fields(account))


class ProfileView(AccountSummary):
    """Public profile with recent feedback."""

    is_public: bool
    last_active: datetime
    created_at: datetime
    recent_feedback: list[FeedbackView]

    @classmethod
    def from_account(cls, account: Account) -> "ProfileView":
        return cls(
            **cls.summary_fields(account),
            is_public=account.is_public,
            last_active=account.last_active,
            created_at=account.created_at,
            recent_feedback=[
                FeedbackView.from_feedback(entry) for entry in account.recent_feedback(5)
            ],
        )


class PrivateProfileView(ProfileView):
    """Profile as seen by its owner or an admin."""

    email: str
    is_banned: bool
    ban_reason: Optional[str]
    updated_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "PrivateProfileView":
        public = ProfileView.from_account(account)
        return cls(
            **public.model_dump(),
            email=account.email.root,
            is_banned=account.is_banned,
            ban_reason=account.ban_reason,
            updated_at=account.updated_at,
        )


class PartyView(ApiModel):
    """One side of a swap."""

    id: str
    name: str
    profile_photo: Optional[str] = None


class FeedbackFlagsView(ApiModel):
    from_user: bool
    to_user: bool


class SwapView(ApiModel):
    """Swap request with both parties resolved."""

    id: str
    from_user: PartyView
    to_user: PartyView
    skills_offered: list[str]
    skills_requested: list[str]
    message: str
    status: SwapStatus
    feedback_submitted: FeedbackFlagsView
    accepted_at: Optional[datetime]
    completed_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_swap(
        cls, swap: SwapRequest, parties: dict[Any, Account]
    ) -> "SwapView":
        return cls(
            id=str(swap.id),
            from_user=party_view(swap.from_account_id, parties),
            to_user=party_view(swap.to_account_id, parties),
            skills_offered=list(swap.skills_offered),
            skills_requested=list(swap.skills_requested),
            message=swap.message,
            status=swap.status,
            feedback_submitted=FeedbackFlagsView(
                from_user=swap.feedback_submitted.from_user,
                to_user=swap.feedback_submitted.to_user,
            ),
            accepted_at=swap.accepted_at,
            completed_at=swap.completed_at,
            created_at=swap.created_at,
            updated_at=swap.updated_at,
        )


def party_view(account_id: Any, parties: dict[Any, Account]) -> PartyView:
    account = parties.get(account_id)
    if account is None:
        return PartyView(id=str(account_id), name="Unknown user")
    return PartyView(
        id=str(account.id), name=account.name, profile_photo=account.profile_photo
    )


class NotificationView(ApiModel):
    id: str
    type: NotificationType
    title: str
    message: str
    read: bool
    data: dict[str, Any]
    related_user: Optional[str]
    related_swap: Optional[str]
    email_sent: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationView":
        return cls(
            id=str(notification.id),
            type=notification.type,
            title=notification.title,
            message=notification.message,
            read=notification.read,
            data=notification.data,
            related_user=str(notification.related_account_id)
            if notification.related_account_id
            else None,
            related_swap=str(notification.related_swap_id)
            if notification.related_swap_id
            else None,
            email_sent=notification.email_sent,
            created_at=notification.created_at,
        )


class AdminView(ApiModel):
    """Admin account without credentials or lockout state."""

    id: str
    name: str
    email: str
    role: AdminRole
    permissions: list[str]
    is_active: bool
    last_login: Optional[datetime]
    created_at: datetime

    @classmethod
    def from_admin(cls, admin: Admin) -> "AdminView":
        return cls(
            id=str(admin.id),
            name=admin.name,
            email=admin.email.root,
            role=admin.role,
            permissions=sorted(permission.value for permission in admin.permissions),
            is_active=admin.is_active,
            last_login=admin.last_login,
            created_at=admin.created_at,
        )


async def swap_views(
    account_service: AccountService, swaps: list[SwapRequest]
) -> list[SwapView]:
    """Build swap views, loading every party in one query."""
    parties = await account_service.get_many(
        [swap.from_account_id for swap in swaps] + [swap.to_account_id for swap in swaps]
    )
    return [SwapView.from_swap(swap, parties) for swap in swaps]
