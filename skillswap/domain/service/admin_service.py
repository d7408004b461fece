"""Admin domain service."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from skillswap.config import AuthSettings
from skillswap.domain.error import (
    AccountLockedError,
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from skillswap.domain.model import ROLE_DEFAULT_PERMISSIONS, Admin
from skillswap.domain.model.common import utc_now
from skillswap.domain.repository import AdminRepository
from skillswap.domain.value import AdminId, AdminRole, EmailAddress, Permission

from .base import Service
from .password import PasswordHasher

# Roles that can be handed out through admin management
ASSIGNABLE_ROLES = frozenset({AdminRole.ADMIN, AdminRole.MODERATOR})


class AdminService(Service):
    """Domain service for admin authentication, authorization and management."""

    def __init__(
        self,
        admin_repository: AdminRepository,
        password_hasher: PasswordHasher,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize admin service.

        Args:
            admin_repository: Admin repository
            password_hasher: Password hasher
            auth_settings: Auth settings (lockout policy)
        """
        self.admin_repository = admin_repository
        self.password_hasher = password_hasher
        self.max_login_attempts = auth_settings.admin_max_login_attempts
        self.lock_duration = timedelta(hours=auth_settings.admin_lock_hours)

    async def authenticate(
        self, email: EmailAddress, password: str, now: datetime | None = None
    ) -> Admin:
        """Check admin credentials and apply the lockout policy.

        A failed attempt is saved before the error is raised.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
            AccountLockedError: If the admin is locked out
            NotAuthorizedError: If the admin is deactivated
        """
        now = now or utc_now()
        with logfire.span("admin_service.authenticate", email=email.root):
            admin = await self.admin_repository.find_by_email(email)
            if admin is None:
                logfire.warn("Admin login for unknown email", email=email.root)
                raise AuthenticationError()

            if admin.is_locked(now):
                logfire.warn("Admin login while locked", admin_id=str(admin.id))
                raise AccountLockedError()

            if not admin.is_active:
                raise NotAuthorizedError(
                    "admin",
                    str(admin.id),
                    str(admin.id),
                    message="Account is deactivated",
                )

            if not self.password_hasher.verify(password, admin.password_hash):
                failed = admin.with_failed_login(
                    now, self.max_login_attempts, self.lock_duration
                )
                await self.admin_repository.record_login_failure(failed)
                logfire.warn(
                    "Admin login failed",
                    admin_id=str(admin.id),
                    attempts=failed.login_attempts,
                    locked=failed.is_locked(now),
                )
                raise AuthenticationError()

            logged_in = await self.admin_repository.save(admin.with_successful_login(now))
            logfire.info("Admin logged in", admin_id=str(admin.id), role=admin.role.value)
            return logged_in

    async def require_permission(self, admin_id: AdminId, permission: Permission) -> Admin:
        """Load an active admin and check one permission.

        Raises:
            AuthenticationError: If the admin no longer exists or is inactive
            NotAuthorizedError: If the admin lacks the permission
        """
        with logfire.span(
            "admin_service.require_permission",
            admin_id=str(admin_id),
            permission=permission.value,
        ):
            admin = await self.admin_repository.find_by_id(admin_id)
            if admin is None or not admin.is_active:
                raise AuthenticationError("Not authorized, admin not found or inactive")
            if not admin.has_permission(permission):
                logfire.warn(
                    "Admin permission denied",
                    admin_id=str(admin_id),
                    permission=permission.value,
                )
                raise NotAuthorizedError(
                    "permission",
                    permission.value,
                    str(admin_id),
                    message="Insufficient permissions",
                )
            return admin

    async def get_admin(self, admin_id: AdminId) -> Admin:
        admin = await self.admin_repository.find_by_id(admin_id)
        if admin is None:
            raise NotFoundError("Admin", str(admin_id))
        return admin

    async def list_admins(self) -> list[Admin]:
        with logfire.span("admin_service.list_admins"):
            return await self.admin_repository.list_all()

    async def create_admin(
        self,
        name: str,
        email: EmailAddress,
        password: str,
        role: AdminRole = AdminRole.MODERATOR,
        permissions: set[Permission] | None = None,
    ) -> Admin:
        """Create an admin or moderator.

        Permissions default to the role's default set.

        Raises:
            ValidationError: If the role cannot be assigned
            ConflictError: If the email is already used by an admin
        """
        with logfire.span("admin_service.create_admin", email=email.root, role=role.value):
            if role not in ASSIGNABLE_ROLES:
                raise ValidationError("Role must be admin or moderator")
            return await self._create(name, email, password, role, permissions)

    async def create_super_admin(
        self, name: str, email: EmailAddress, password: str
    ) -> Admin:
        """Bootstrap a super admin (maintenance scripts only)."""
        with logfire.span("admin_service.create_super_admin", email=email.root):
            return await self._create(name, email, password, AdminRole.SUPER_ADMIN, None)

    async def update_admin(
        self,
        admin_id: AdminId,
        name: str | None = None,
        role: AdminRole | None = None,
        permissions: set[Permission] | None = None,
        is_active: bool | None = None,
    ) -> Admin:
        """Change an admin's name, role, permissions or active flag.

        Raises:
            NotFoundError: If the admin does not exist
            ValidationError: If the new role cannot be assigned
        """
        with logfire.span("admin_service.update_admin", admin_id=str(admin_id)):
            admin = await self.get_admin(admin_id)
            if role is not None and role not in ASSIGNABLE_ROLES:
                raise ValidationError("Role must be admin or moderator")

            update: dict = {"updated_at": utc_now()}
            if name is not None:
                update["name"] = name
            if role is not None:
                update["role"] = role
            if permissions is not None:
                update["permissions"] = frozenset(permissions)
            if is_active is not None:
                update["is_active"] = is_active

            saved = await self.admin_repository.save(admin.model_copy(update=update))
            logfire.info("Admin updated", admin_id=str(admin_id))
            return saved

    async def delete_admin(self, actor_id: AdminId, admin_id: AdminId) -> None:
        """Delete an admin.

        Raises:
            NotFoundError: If the admin does not exist
            ValidationError: If the admin is a super admin or the caller
        """
        with logfire.span(
            "admin_service.delete_admin", actor_id=str(actor_id), admin_id=str(admin_id)
        ):
            admin = await self.get_admin(admin_id)
            if admin.role is AdminRole.SUPER_ADMIN:
                raise ValidationError("Cannot delete super admin")
            if admin.id == actor_id:
                raise ValidationError("Cannot delete your own admin account")
            await self.admin_repository.delete(admin_id)
            logfire.info("Admin deleted", admin_id=str(admin_id))

    async def _create(
        self,
        name: str,
        email: EmailAddress,
        password: str,
        role: AdminRole,
        permissions: set[Permission] | None,
    ) -> Admin:
        if await self.admin_repository.find_by_email(email):
            raise ConflictError("Admin already exists with this email")

        admin = Admin(
            id=AdminId(uuid4()),
            name=name,
            email=email,
            password_hash=self.password_hasher.hash(password),
            role=role,
            permissions=frozenset(
                permissions if permissions is not None else ROLE_DEFAULT_PERMISSIONS[role]
            ),
        )
        saved = await self.admin_repository.save(admin)
        logfire.info("Admin created", admin_id=str(saved.id), role=role.value)
        return saved
