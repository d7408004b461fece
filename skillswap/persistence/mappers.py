"""Mappers between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
rather than through the SQLAlchemy ORM.
"""

from typing import Any, Dict
from uuid import UUID

from skillswap.domain.model import (
    Account,
    AccountCredential,
    Admin,
    Feedback,
    Notification,
    SwapRequest,
)
from skillswap.domain.value import (
    AccountId,
    AdminId,
    AdminRole,
    Availability,
    EmailAddress,
    FeedbackId,
    FeedbackSubmitted,
    NotificationId,
    NotificationType,
    Permission,
    SwapId,
    SwapStatus,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_feedback(row: Dict[str, Any]) -> Feedback:
    return Feedback(
        id=FeedbackId(_uuid(row["id"])),
        from_account_id=AccountId(_uuid(row["from_account_id"])),
        from_name=row["from_name"],
        swap_id=_optional_uuid(row.get("swap_id")),
        stars=row["stars"],
        comment=row["comment"],
        created_at=row["created_at"],
    )


def feedback_to_dict(account_id: AccountId, entry: Feedback) -> Dict[str, Any]:
    return {**entry.model_dump(), "account_id": account_id}


def row_to_account(row: Dict[str, Any], feedback: list[Feedback]) -> Account:
    """Convert an account row plus its feedback rows to the Account aggregate.

    Args:
        row: Database row as dict
        feedback: Feedback entries the account received

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(_uuid(row["id"])),
        name=row["name"],
        email=EmailAddress(row["email"]),
        location=row.get("location"),
        profile_photo=row.get("profile_photo"),
        skills_offered=list(row.get("skills_offered") or []),
        skills_wanted=list(row.get("skills_wanted") or []),
        availability=Availability(row["availability"]),
        is_public=row["is_public"],
        is_banned=row["is_banned"],
        ban_reason=row.get("ban_reason"),
        is_verified=row["is_verified"],
        rating_sum=row["rating_sum"],
        rating_count=row["rating_count"],
        feedback=feedback,
        last_active=row["last_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Account columns, without the embedded feedback entries."""
    data = account.model_dump(exclude={"feedback"})
    data["email"] = account.email.root
    data["availability"] = account.availability.value
    return data


def row_to_credential(row: Dict[str, Any]) -> AccountCredential:
    return AccountCredential(
        account_id=AccountId(_uuid(row["account_id"])),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_swap(row: Dict[str, Any]) -> SwapRequest:
    """Convert database row to SwapRequest domain model."""
    return SwapRequest(
        id=SwapId(_uuid(row["id"])),
        from_account_id=AccountId(_uuid(row["from_account_id"])),
        to_account_id=AccountId(_uuid(row["to_account_id"])),
        skills_offered=list(row["skills_offered"]),
        skills_requested=list(row["skills_requested"]),
        message=row["message"],
        status=SwapStatus(row["status"]),
        feedback_submitted=FeedbackSubmitted(
            from_user=row["feedback_from_user"], to_user=row["feedback_to_user"]
        ),
        accepted_at=row.get("accepted_at"),
        completed_at=row.get("completed_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def swap_to_dict(swap: SwapRequest) -> Dict[str, Any]:
    """Convert SwapRequest to database dict, flattening the feedback flags."""
    data = swap.model_dump(exclude={"feedback_submitted"})
    data["status"] = swap.status.value
    data["feedback_from_user"] = swap.feedback_submitted.from_user
    data["feedback_to_user"] = swap.feedback_submitted.to_user
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=AccountId(_uuid(row["user_id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        read=row["read"],
        data=row.get("data") or {},
        related_account_id=_optional_uuid(row.get("related_account_id")),
        related_swap_id=_optional_uuid(row.get("related_swap_id")),
        email_sent=row["email_sent"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data


def row_to_admin(row: Dict[str, Any]) -> Admin:
    return Admin(
        id=AdminId(_uuid(row["id"])),
        name=row["name"],
        email=EmailAddress(row["email"]),
        password_hash=row["password_hash"],
        role=AdminRole(row["role"]),
        permissions=frozenset(Permission(p) for p in row.get("permissions") or []),
        is_active=row["is_active"],
        last_login=row.get("last_login"),
        login_attempts=row["login_attempts"],
        lock_until=row.get("lock_until"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def admin_to_dict(admin: Admin) -> Dict[str, Any]:
    data = admin.model_dump()
    data["email"] = admin.email.root
    data["role"] = admin.role.value
    data["permissions"] = sorted(p.value for p in admin.permissions)
    return data
