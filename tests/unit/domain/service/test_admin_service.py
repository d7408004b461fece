"""Unit tests for AdminService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from skillswap.domain.error import (
    AccountLockedError,
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from skillswap.domain.model.common import utc_now
from skillswap.domain.repository import AdminRepository
from skillswap.domain.service import AdminService
from skillswap.domain.value import AdminId, AdminRole, EmailAddress, Permission
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

PASSWORD = "correct-horse"


async def _moderator(env, email: str = "mod@example.com"):
    admin_service = await env.get(AdminService)
    return await admin_service.create_admin(
        "Mod", EmailAddress(email), PASSWORD, role=AdminRole.MODERATOR
    )


class TestAuthenticate:
    """Login and the lockout policy."""

    @pytest.mark.asyncio
    async def test_successful_login_resets_attempts(self, unit_env):
        admin_service = await unit_env.get(AdminService)
        admin_repo = await unit_env.get(AdminRepository)
        admin = await _moderator(unit_env)
        with pytest.raises(AuthenticationError):
            await admin_service.authenticate(admin.email, "wrong")

        logged_in = await admin_service.authenticate(admin.email, PASSWORD)

        assert logged_in.login_attempts == 0
        assert logged_in.last_login is not None
        assert (await admin_repo.find_by_id(admin.id)).login_attempts == 0

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env):
        admin_service = await unit_env.get(AdminService)

        with pytest.raises(AuthenticationError):
            await admin_service.authenticate(EmailAddress("nobody@example.com"), PASSWORD)

    @pytest.mark.asyncio
    async def test_failed_attempt_is_recorded(self, unit_env):
        admin_service = await unit_env.get(AdminService)
        admin_repo = await unit_env.get(AdminRepository)
        admin = await _moderator(unit_env)

        with pytest.raises(AuthenticationError):
            await admin_service.authenticate(admin.email, "wrong")

        assert (await admin_repo.find_by_id(admin.id)).login_attempts == 1

    @pytest.mark.asyncio
    async def test_fifth_failure_locks_for_two_hours(self, unit_env):
        """Even the right password is refused while the lock holds."""
        # Arrange
        admin_service = await unit_env.get(AdminService)
        admin = await _moderator(unit_env)
        now = utc_now()

        # Act
        for _ in range(5):
            with pytest.raises(AuthenticationError):
                await admin_service.authenticate(admin.email, "wrong", now=now)

        # Assert
        with pytest.raises(AccountLockedError):
            await admin_service.authenticate(
                admin.email, PASSWORD, now=now + timedelta(hours=1)
            )
        logged_in = await admin_service.authenticate(
            admin.email, PASSWORD, now=now + timedelta(hours=2, seconds=1)
        )
        assert logged_in.lock_until is None

    @pytest.mark.asyncio
    async def test_deactivated_admin_is_refused(self, unit_env):
        admin_service = await unit_env.get(AdminService)
        admin = await _moderator(unit_env)
        await admin_service.update_admin(admin.id, is_active=False)

        with pytest.raises(NotAuthorizedError, match="deactivated"):
            await admin_service.authenticate(admin.email, PASSWORD)


class TestPermissions:
    @pytest.mark.asyncio
    async def test_moderator_lacks_manage_users(self, unit_env):
        admin_service = await unit_env.get(AdminService)
        admin = await _moderator(unit_env)

        with pytest.raises(NotAuthorizedError, match="Insufficient permissions"):
            await admin_service.require_permission(admin.id, Permission.MANAGE_USERS)

        allowed = await admin_service.require_permission(
            admin.id, Permission.VIEW_ANALYTICS
        )
        assert allowed.id == admin.id

    @pytest.mark.asyncio
    async def test_super_admin_holds_every_permission(self, unit_env):
        admin_service = await unit_env.get(AdminService)
        root = await admin_service.create_super_admin(
            "Root", EmailAddress("root@example.com"), PASSWORD
        )

        for permission in Permission:
            await admin_service.require_permission(root.id, permission)

    @pytest.mark.asyncio
    async def test_inactive_admin_token_is_rejected(self, unit_env):
        admin_service = await unit_env.get(AdminService)
        admin = await _moderator(unit_env)
        await admin_service.update_admin(admin.id, is_active=False)

        with pytest.raises(AuthenticationError):
            await admin_service.require_permission(admin.id, Permission.VIEW_ANALYTICS)


class TestManagement:
    @pytest.mark.asyncio
    async def test_create_admin_uses_role_defaults(self, unit_env):
        admin_service = await unit_env.get(AdminService)

        admin = await admin_service.create_admin(
            "Ops", EmailAddress("ops@example.com"), PASSWORD, role=AdminRole.ADMIN
        )

        assert Permission.MANAGE_USERS in admin.permissions
        assert Permission.MANAGE_ADMINS not in admin.permissions
        assert admin.password_hash != PASSWORD

    @pytest.mark.asyncio
    async def test_super_admin_role_cannot_be_assigned(self, unit_env):
        admin_service = await unit_env.get(AdminService)

        with pytest.raises(ValidationError, match="admin or moderator"):
            await admin_service.create_admin(
                "Sneaky",
                EmailAddress("sneaky@example.com"),
                PASSWORD,
                role=AdminRole.SUPER_ADMIN,
            )

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, unit_env):
        admin_service = await unit_env.get(AdminService)
        await _moderator(unit_env)

        with pytest.raises(ConflictError):
            await _moderator(unit_env)

    @pytest.mark.asyncio
    async def test_delete_rules(self, unit_env):
        admin_service = await unit_env.get(AdminService)
        root = await admin_service.create_super_admin(
            "Root", EmailAddress("root@example.com"), PASSWORD
        )
        ops = await admin_service.create_admin(
            "Ops", EmailAddress("ops@example.com"), PASSWORD, role=AdminRole.ADMIN
        )
        mod = await _moderator(unit_env)

        with pytest.raises(ValidationError, match="Cannot delete super admin"):
            await admin_service.delete_admin(ops.id, root.id)
        with pytest.raises(ValidationError, match="your own admin account"):
            await admin_service.delete_admin(ops.id, ops.id)

        await admin_service.delete_admin(root.id, mod.id)
        with pytest.raises(NotFoundError):
            await admin_service.get_admin(mod.id)

    @pytest.mark.asyncio
    async def test_delete_unknown_admin(self, unit_env):
        admin_service = await unit_env.get(AdminService)

        with pytest.raises(NotFoundError):
            await admin_service.delete_admin(AdminId(uuid4()), AdminId(uuid4()))
