"""Unit tests for BroadcastUseCase."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from skillswap.application.usecase.admin import BroadcastRequest, BroadcastUseCase
from skillswap.domain.error import NotAuthorizedError, ValidationError
from skillswap.domain.repository import AccountRepository
from skillswap.domain.service import AdminService, NotificationService
from skillswap.domain.value import (
    AdminRole,
    EmailAddress,
    NotificationType,
    PageRequest,
    Permission,
)
from tests.factories import make_account
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _admin(env, role: AdminRole = AdminRole.ADMIN, permissions=None):
    admin_service = await env.get(AdminService)
    return await admin_service.create_admin(
        "Ops",
        EmailAddress("ops@example.com"),
        "secret1",
        role=role,
        permissions=permissions,
    )


class TestBroadcastUseCase:
    """Tests for BroadcastUseCase."""

    @pytest.mark.asyncio
    async def test_send_to_all_skips_banned(self, unit_env):
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        notification_service = await unit_env.get(NotificationService)
        use_case = await unit_env.get(BroadcastUseCase)
        admin = await _admin(unit_env)
        active = await account_repo.save(make_account())
        await account_repo.save(make_account())
        banned = await account_repo.save(make_account(is_banned=True))

        # Act
        response = await use_case.execute(
            BroadcastRequest(
                admin_id=str(admin.id),
                title="  Scheduled maintenance ",
                message="Down for an hour tonight",
                send_to_all=True,
            )
        )

        # Assert
        assert response.sent_count == 2
        notifications, _ = await notification_service.list_for_user(
            active.id, PageRequest()
        )
        assert notifications[0].title == "Scheduled maintenance"
        assert notifications[0].type == NotificationType.ADMIN_MESSAGE
        assert notifications[0].data == {"adminMessage": True}
        assert await notification_service.count_unread(banned.id) == 0

    @pytest.mark.asyncio
    async def test_explicit_recipients_are_deduplicated(self, unit_env):
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(BroadcastUseCase)
        admin = await _admin(unit_env)
        target = await account_repo.save(make_account())

        response = await use_case.execute(
            BroadcastRequest(
                admin_id=str(admin.id),
                type=NotificationType.SYSTEM,
                title="Hello",
                message="Just you",
                user_ids=[str(target.id), str(target.id)],
            )
        )

        assert response.sent_count == 1

    @pytest.mark.asyncio
    async def test_recipients_are_required(self, unit_env):
        use_case = await unit_env.get(BroadcastUseCase)
        admin = await _admin(unit_env)

        with pytest.raises(ValidationError, match="sendToAll or userIds"):
            await use_case.execute(
                BroadcastRequest(admin_id=str(admin.id), title="Hello", message="Nobody")
            )

    @pytest.mark.asyncio
    async def test_permission_is_required(self, unit_env):
        use_case = await unit_env.get(BroadcastUseCase)
        admin = await _admin(
            unit_env, role=AdminRole.MODERATOR, permissions={Permission.VIEW_ANALYTICS}
        )

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                BroadcastRequest(
                    admin_id=str(admin.id), title="Hi", message="All", send_to_all=True
                )
            )

    def test_swap_types_cannot_be_broadcast(self):
        with pytest.raises(PydanticValidationError):
            BroadcastRequest(
                admin_id="x",
                type=NotificationType.SWAP_REQUEST,
                title="Fake",
                message="Fake",
                send_to_all=True,
            )
