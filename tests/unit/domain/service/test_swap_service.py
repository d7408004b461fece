"""Unit tests for SwapService."""

from uuid import uuid4

import pytest

from skillswap.adapter.email.client import MockEmailSender
from skillswap.domain.error import (
    ConflictError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from skillswap.domain.repository import (
    AccountRepository,
    NotificationRepository,
    SwapRequestRepository,
)
from skillswap.domain.service import AfterCommit, MailService, SwapService
from skillswap.domain.value import (
    AccountId,
    Actor,
    NotificationType,
    PageRequest,
    SwapBox,
    SwapId,
    SwapStatus,
)
from tests.factories import make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _parties(env):
    """Save a requester and a recipient, returning them as actors."""
    account_repo = await env.get(AccountRepository)
    alice = await account_repo.save(make_account(name="Alice"))
    bob = await account_repo.save(make_account(name="Bob", email="bob@example.com"))
    return Actor(id=alice.id, name=alice.name), Actor(id=bob.id, name=bob.name)


async def _open_swap(env, requester: Actor, recipient: Actor):
    swap_service = await env.get(SwapService)
    return await swap_service.create_swap(
        requester, recipient.id, ["Guitar"], ["Spanish"], "Guitar for Spanish?"
    )


async def _notifications_for(env, account_id: AccountId):
    repo = await env.get(NotificationRepository)
    notifications, _ = await repo.list_for_user(account_id, PageRequest(limit=50))
    return notifications


class TestCreateSwap:
    """Tests for create_swap."""

    @pytest.mark.asyncio
    async def test_create_swap_notifies_and_emails_recipient(self, unit_env):
        """Creating a swap should notify the recipient and send them an email."""
        # Arrange
        alice, bob = await _parties(unit_env)
        mail_service = await unit_env.get(MailService)
        email_sender = await unit_env.get(MockEmailSender)

        # Act
        swap = await _open_swap(unit_env, alice, bob)
        (await unit_env.get(AfterCommit)).run()
        await mail_service.drain()

        # Assert
        assert swap.status == SwapStatus.PENDING
        assert swap.from_account_id == alice.id

        notifications = await _notifications_for(unit_env, bob.id)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.SWAP_REQUEST
        assert notifications[0].title == "New Swap Request"
        assert notifications[0].message == "Alice wants to swap skills with you"
        assert notifications[0].related_swap_id == swap.id

        assert len(email_sender.sent_to("bob@example.com")) == 1

    @pytest.mark.asyncio
    async def test_self_swap_is_rejected(self, unit_env):
        alice, _ = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)

        with pytest.raises(ValidationError, match="yourself"):
            await swap_service.create_swap(alice, alice.id, ["A"], ["B"], "Hi")

    @pytest.mark.asyncio
    async def test_unknown_target_is_not_found(self, unit_env):
        alice, _ = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)

        with pytest.raises(NotFoundError):
            await swap_service.create_swap(
                alice, AccountId(uuid4()), ["A"], ["B"], "Hi"
            )

    @pytest.mark.asyncio
    async def test_private_or_banned_target_is_refused(self, unit_env):
        alice, _ = await _parties(unit_env)
        account_repo = await unit_env.get(AccountRepository)
        swap_service = await unit_env.get(SwapService)
        private = await account_repo.save(make_account(is_public=False))
        banned = await account_repo.save(make_account(is_banned=True))

        with pytest.raises(NotAuthorizedError, match="private profile"):
            await swap_service.create_swap(alice, private.id, ["A"], ["B"], "Hi")
        with pytest.raises(NotAuthorizedError, match="banned user"):
            await swap_service.create_swap(alice, banned.id, ["A"], ["B"], "Hi")

    @pytest.mark.asyncio
    async def test_duplicate_pending_request_conflicts(self, unit_env):
        """Only one pending request may exist per directed pair."""
        alice, bob = await _parties(unit_env)
        await _open_swap(unit_env, alice, bob)

        with pytest.raises(ConflictError, match="pending swap request"):
            await _open_swap(unit_env, alice, bob)

    @pytest.mark.asyncio
    async def test_reverse_direction_is_allowed(self, unit_env):
        alice, bob = await _parties(unit_env)
        await _open_swap(unit_env, alice, bob)

        reverse = await _open_swap(unit_env, bob, alice)

        assert reverse.from_account_id == bob.id

    @pytest.mark.asyncio
    async def test_new_request_allowed_once_previous_is_answered(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        first = await _open_swap(unit_env, alice, bob)
        await swap_service.reject(first.id, bob)

        second = await _open_swap(unit_env, alice, bob)

        assert second.id != first.id


class TestTransitions:
    """Tests for accept, reject, cancel and complete."""

    @pytest.mark.asyncio
    async def test_accept_then_complete(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap = await _open_swap(unit_env, alice, bob)

        accepted = await swap_service.accept(swap.id, bob)
        completed = await swap_service.complete(accepted.id, alice)

        assert accepted.status == SwapStatus.ACCEPTED
        assert accepted.accepted_at is not None
        assert completed.status == SwapStatus.COMPLETED
        assert completed.completed_at is not None

        # Alice hears about the acceptance, Bob about the completion
        alice_types = [n.type for n in await _notifications_for(unit_env, alice.id)]
        bob_types = [n.type for n in await _notifications_for(unit_env, bob.id)]
        assert NotificationType.SWAP_ACCEPTED in alice_types
        assert NotificationType.SWAP_COMPLETED in bob_types

    @pytest.mark.asyncio
    async def test_only_recipient_may_accept(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap = await _open_swap(unit_env, alice, bob)

        with pytest.raises(NotAuthorizedError):
            await swap_service.accept(swap.id, alice)

    @pytest.mark.asyncio
    async def test_only_requester_may_cancel(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap = await _open_swap(unit_env, alice, bob)

        with pytest.raises(NotAuthorizedError):
            await swap_service.cancel(swap.id, bob)

    @pytest.mark.asyncio
    async def test_reject_with_reason_is_included_in_notification(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap = await _open_swap(unit_env, alice, bob)

        await swap_service.reject(swap.id, bob, reason="No time this month")

        [notification] = [
            n
            for n in await _notifications_for(unit_env, alice.id)
            if n.type == NotificationType.SWAP_REJECTED
        ]
        assert notification.message == (
            "Bob rejected your swap request: No time this month"
        )

    @pytest.mark.asyncio
    async def test_outsider_cannot_complete(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap = await _open_swap(unit_env, alice, bob)
        await swap_service.accept(swap.id, bob)

        outsider = Actor(id=AccountId(uuid4()), name="Eve")
        with pytest.raises(NotAuthorizedError):
            await swap_service.complete(swap.id, outsider)

    @pytest.mark.asyncio
    async def test_completing_pending_swap_is_invalid(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap = await _open_swap(unit_env, alice, bob)

        with pytest.raises(InvalidStateError):
            await swap_service.complete(swap.id, alice)

    @pytest.mark.asyncio
    async def test_second_accept_is_invalid_and_keeps_accepted_at(self, unit_env):
        # Arrange
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap = await _open_swap(unit_env, alice, bob)
        accepted = await swap_service.accept(swap.id, bob)

        # Act
        with pytest.raises(InvalidStateError, match="not pending"):
            await swap_service.accept(swap.id, bob)

        # Assert
        stored = await swap_service.get_swap(swap.id)
        assert stored.status == SwapStatus.ACCEPTED
        assert stored.accepted_at == accepted.accepted_at

    @pytest.mark.asyncio
    async def test_second_complete_is_invalid(self, unit_env):
        """Either party may complete, but only once."""
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap = await _open_swap(unit_env, alice, bob)
        await swap_service.accept(swap.id, bob)
        completed = await swap_service.complete(swap.id, bob)

        with pytest.raises(InvalidStateError):
            await swap_service.complete(swap.id, alice)

        stored = await swap_service.get_swap(swap.id)
        assert stored.status == SwapStatus.COMPLETED
        assert stored.completed_at == completed.completed_at

    @pytest.mark.asyncio
    async def test_transition_of_unknown_swap_is_not_found(self, unit_env):
        _, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)

        with pytest.raises(NotFoundError):
            await swap_service.accept(SwapId(uuid4()), bob)


class TestDeleteSwap:
    @pytest.mark.asyncio
    async def test_requester_deletes_pending_swap(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap_repo = await unit_env.get(SwapRequestRepository)
        swap = await _open_swap(unit_env, alice, bob)

        await swap_service.delete_swap(swap.id, alice)

        assert await swap_repo.find_by_id(swap.id) is None

    @pytest.mark.asyncio
    async def test_accepted_swap_cannot_be_deleted(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap = await _open_swap(unit_env, alice, bob)
        await swap_service.accept(swap.id, bob)

        with pytest.raises(InvalidStateError):
            await swap_service.delete_swap(swap.id, alice)

    @pytest.mark.asyncio
    async def test_recipient_cannot_delete(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap = await _open_swap(unit_env, alice, bob)

        with pytest.raises(NotAuthorizedError):
            await swap_service.delete_swap(swap.id, bob)


class TestListing:
    @pytest.mark.asyncio
    async def test_boxes_and_stats(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        sent = await _open_swap(unit_env, alice, bob)
        received = await _open_swap(unit_env, bob, alice)
        await swap_service.accept(received.id, alice)

        sent_page, sent_total = await swap_service.list_swaps(
            alice.id, PageRequest(), box=SwapBox.SENT
        )
        inbox, inbox_total = await swap_service.list_inbox(bob.id, PageRequest())
        stats = await swap_service.stats_for(alice.id)

        assert [s.id for s in sent_page] == [sent.id]
        assert sent_total == 1
        assert [s.id for s in inbox] == [sent.id]
        assert inbox_total == 1
        assert stats[SwapStatus.PENDING] == 1
        assert stats[SwapStatus.ACCEPTED] == 1
        assert stats[SwapStatus.COMPLETED] == 0

    @pytest.mark.asyncio
    async def test_get_swap_for_outsider_is_refused(self, unit_env):
        alice, bob = await _parties(unit_env)
        swap_service = await unit_env.get(SwapService)
        swap = await _open_swap(unit_env, alice, bob)

        with pytest.raises(NotAuthorizedError):
            await swap_service.get_swap_for(swap.id, AccountId(uuid4()))
