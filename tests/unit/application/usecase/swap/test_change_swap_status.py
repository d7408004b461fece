"""Unit tests for ChangeSwapStatusUseCase."""

import pytest

from skillswap.application.usecase.swap import (
    ChangeSwapStatusRequest,
    ChangeSwapStatusUseCase,
    SwapAction,
)
from skillswap.domain.error import AuthenticationError, InvalidStateError
from skillswap.domain.repository import AccountRepository, NotificationRepository
from skillswap.domain.service import SwapService
from skillswap.domain.value import Actor, PageRequest, SwapStatus
from tests.factories import make_account
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _pending_swap(env):
    account_repo = await env.get(AccountRepository)
    swap_service = await env.get(SwapService)
    alice = await account_repo.save(make_account(name="Alice"))
    bob = await account_repo.save(make_account(name="Bob"))
    swap = await swap_service.create_swap(
        Actor(id=alice.id, name=alice.name), bob.id, ["Guitar"], ["Spanish"], "Hi!"
    )
    return alice, bob, swap


class TestChangeSwapStatusUseCase:
    """Tests for ChangeSwapStatusUseCase."""

    @pytest.mark.asyncio
    async def test_accept_renders_both_parties(self, unit_env):
        # Arrange
        alice, bob, swap = await _pending_swap(unit_env)
        use_case = await unit_env.get(ChangeSwapStatusUseCase)

        # Act
        view = await use_case.execute(
            ChangeSwapStatusRequest(
                account_id=str(bob.id), swap_id=str(swap.id), action=SwapAction.ACCEPT
            )
        )

        # Assert
        assert view.status is SwapStatus.ACCEPTED
        assert view.from_user.name == "Alice"
        assert view.to_user.name == "Bob"
        assert view.accepted_at is not None

    @pytest.mark.asyncio
    async def test_blank_reason_is_dropped(self, unit_env):
        alice, _, swap = await _pending_swap(unit_env)
        use_case = await unit_env.get(ChangeSwapStatusUseCase)
        notification_repo = await unit_env.get(NotificationRepository)

        await use_case.execute(
            ChangeSwapStatusRequest(
                account_id=str(alice.id),
                swap_id=str(swap.id),
                action=SwapAction.CANCEL,
                reason="   ",
            )
        )

        bob_id = swap.to_account_id
        notifications, _ = await notification_repo.list_for_user(bob_id, PageRequest())
        cancelled = [n for n in notifications if n.related_swap_id == swap.id]
        assert cancelled[0].message == "Alice cancelled their swap request"

    @pytest.mark.asyncio
    async def test_terminal_swap_cannot_move(self, unit_env):
        _, bob, swap = await _pending_swap(unit_env)
        use_case = await unit_env.get(ChangeSwapStatusUseCase)
        await use_case.execute(
            ChangeSwapStatusRequest(
                account_id=str(bob.id), swap_id=str(swap.id), action=SwapAction.REJECT
            )
        )

        with pytest.raises(InvalidStateError, match="not pending"):
            await use_case.execute(
                ChangeSwapStatusRequest(
                    account_id=str(bob.id),
                    swap_id=str(swap.id),
                    action=SwapAction.ACCEPT,
                )
            )

    @pytest.mark.asyncio
    async def test_deleted_caller_is_unauthenticated(self, unit_env):
        _, bob, swap = await _pending_swap(unit_env)
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(ChangeSwapStatusUseCase)
        await account_repo.delete(bob.id)

        with pytest.raises(AuthenticationError):
            await use_case.execute(
                ChangeSwapStatusRequest(
                    account_id=str(bob.id), swap_id=str(swap.id), action=SwapAction.ACCEPT
                )
            )
