"""Admin principal.

Admins are a separate principal type from accounts. What an admin may do is
described by an ``AdminAccess`` variant: a super admin holds every
permission regardless of the stored set, every other role is limited to its
explicit permissions.
"""

from datetime import datetime, timedelta
from typing import Literal, Optional, Union

from pydantic import Field

from skillswap.domain.model.common import DomainModel, utc_now
from skillswap.domain.value import AdminId, AdminRole, EmailAddress, Permission
from skillswap.domain.value.common import ValueObject

ROLE_DEFAULT_PERMISSIONS: dict[AdminRole, frozenset[Permission]] = {
    AdminRole.SUPER_ADMIN: frozenset(Permission),
    AdminRole.ADMIN: frozenset(Permission)
    - {Permission.MANAGE_ADMINS, Permission.DELETE_CONTENT},
    AdminRole.MODERATOR: frozenset(
        {
            Permission.VIEW_ANALYTICS,
            Permission.SEND_NOTIFICATIONS,
            Permission.VIEW_REPORTS,
        }
    ),
}


class SuperAdminAccess(ValueObject):
    """Unrestricted access."""

    kind: Literal["super_admin"] = "super_admin"

    def allows(self, permission: Permission) -> bool:
        return True


class ScopedAccess(ValueObject):
    """Access limited to an explicit permission set."""

    kind: Literal["scoped"] = "scoped"
    role: AdminRole
    permissions: frozenset[Permission]

    def allows(self, permission: Permission) -> bool:
        return permission in self.permissions


AdminAccess = Union[SuperAdminAccess, ScopedAccess]


class Admin(DomainModel):
    """Administrative principal with brute-force lockout state."""

    id: AdminId
    name: str = Field(min_length=1, max_length=50)
    email: EmailAddress
    password_hash: str
    role: AdminRole = AdminRole.MODERATOR
    permissions: frozenset[Permission] = Field(default_factory=frozenset)
    is_active: bool = True
    last_login: Optional[datetime] = None
    login_attempts: int = Field(default=0, ge=0)
    lock_until: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def access(self) -> AdminAccess:
        if self.role is AdminRole.SUPER_ADMIN:
            return SuperAdminAccess()
        return ScopedAccess(role=self.role, permissions=self.permissions)

    def has_permission(self, permission: Permission) -> bool:
        return self.access.allows(permission)

    def is_locked(self, now: datetime) -> bool:
        return self.lock_until is not None and self.lock_until > now

    def with_failed_login(
        self, now: datetime, max_attempts: int, lock_for: timedelta
    ) -> "Admin":
        """Record a failed login, locking the admin once ``max_attempts`` is reached.

        A lock that has already expired starts a fresh count at one.
        """
        if self.lock_until is not None and self.lock_until <= now:
            return self.model_copy(
                update={"login_attempts": 1, "lock_until": None, "updated_at": now}
            )

        attempts = self.login_attempts + 1
        update: dict = {"login_attempts": attempts, "updated_at": now}
        if attempts >= max_attempts and not self.is_locked(now):
            update["lock_until"] = now + lock_for
        return self.model_copy(update=update)

    def with_successful_login(self, now: datetime) -> "Admin":
        return self.model_copy(
            update={
                "login_attempts": 0,
                "lock_until": None,
                "last_login": now,
                "updated_at": now,
            }
        )
