"""Unit tests for UpdateUserUseCase."""

import pytest

from skillswap.application.usecase.admin import UpdateUserRequest, UpdateUserUseCase
from skillswap.domain.error import NotAuthorizedError
from skillswap.domain.repository import AccountRepository, NotificationRepository
from skillswap.domain.service import AdminService
from skillswap.domain.value import AdminRole, EmailAddress, PageRequest
from tests.factories import make_account
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _admin(env, role: AdminRole):
    admin_service = await env.get(AdminService)
    return await admin_service.create_admin(
        "Staff", EmailAddress(f"{role.value}@example.com"), "secret1", role=role
    )


class TestUpdateUserUseCase:
    """Tests for banning and verifying accounts."""

    @pytest.mark.asyncio
    async def test_ban_sets_reason_and_notifies(self, unit_env):
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        use_case = await unit_env.get(UpdateUserUseCase)
        admin = await _admin(unit_env, AdminRole.ADMIN)
        target = await account_repo.save(make_account("Spammer"))

        # Act
        profile = await use_case.execute(
            UpdateUserRequest(
                admin_id=str(admin.id),
                user_id=str(target.id),
                is_banned=True,
                ban_reason="  Spam ",
            )
        )

        # Assert
        assert profile.is_banned is True
        stored = await account_repo.find_by_id(target.id)
        assert stored.ban_reason == "Spam"
        notifications, _ = await notification_repo.list_for_user(
            target.id, PageRequest()
        )
        assert notifications[0].title == "Account Suspended"
        assert notifications[0].message == "Your account has been suspended: Spam"

    @pytest.mark.asyncio
    async def test_moderator_cannot_ban(self, unit_env):
        """Banning needs manage_users, which moderators lack by default."""
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(UpdateUserUseCase)
        moderator = await _admin(unit_env, AdminRole.MODERATOR)
        target = await account_repo.save(make_account("Innocent"))

        # Act
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateUserRequest(
                    admin_id=str(moderator.id),
                    user_id=str(target.id),
                    is_banned=True,
                    ban_reason="Because",
                )
            )

        # Assert
        stored = await account_repo.find_by_id(target.id)
        assert stored.is_banned is False
        assert stored.ban_reason is None
