"""Unit tests for FeedbackService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from skillswap.adapter.email.client import MockEmailSender
from skillswap.domain.error import InvalidStateError, NotAuthorizedError, NotFoundError
from skillswap.domain.model.common import utc_now
from skillswap.domain.repository import (
    AccountRepository,
    NotificationRepository,
    SwapRequestRepository,
)
from skillswap.domain.service import AfterCommit, FeedbackService, MailService
from skillswap.domain.value import (
    Actor,
    FeedbackDirection,
    FeedbackId,
    NotificationType,
    PageRequest,
    SwapStatus,
)
from tests.factories import make_account, make_swap
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _completed_swap(env):
    """Save two accounts and a completed swap between them."""
    account_repo = await env.get(AccountRepository)
    swap_repo = await env.get(SwapRequestRepository)
    alice = await account_repo.save(make_account(name="Alice"))
    bob = await account_repo.save(make_account(name="Bob", email="bob@example.com"))
    swap = await swap_repo.create(
        make_swap(
            from_account_id=alice.id,
            to_account_id=bob.id,
            status=SwapStatus.COMPLETED,
            completed_at=utc_now(),
        )
    )
    return Actor(id=alice.id, name=alice.name), Actor(id=bob.id, name=bob.name), swap


class TestSubmitFeedback:
    """Tests for submit_feedback."""

    @pytest.mark.asyncio
    async def test_submit_updates_rating_and_notifies(self, unit_env):
        # Arrange
        alice, bob, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)
        account_repo = await unit_env.get(AccountRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        mail_service = await unit_env.get(MailService)
        email_sender = await unit_env.get(MockEmailSender)

        # Act
        entry = await feedback_service.submit_feedback(swap.id, alice, 4, "Patient and clear")
        (await unit_env.get(AfterCommit)).run()
        await mail_service.drain()

        # Assert
        rated = await account_repo.find_by_id(bob.id)
        assert rated.rating_count == 1
        assert rated.rating_sum == 4
        assert rated.find_feedback(entry.id).from_name == "Alice"

        notifications, _ = await notification_repo.list_for_user(bob.id, PageRequest())
        assert notifications[0].type == NotificationType.FEEDBACK_RECEIVED
        assert notifications[0].message == "Alice left you 4 stars feedback"
        assert notifications[0].data == {"stars": 4, "feedbackId": str(entry.id)}

        [message] = email_sender.sent_to("bob@example.com")
        assert message.subject == "New Feedback Received"

    @pytest.mark.asyncio
    async def test_single_star_message_is_singular(self, unit_env):
        alice, bob, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)
        notification_repo = await unit_env.get(NotificationRepository)

        await feedback_service.submit_feedback(swap.id, bob, 1, "Never showed up")

        notifications, _ = await notification_repo.list_for_user(alice.id, PageRequest())
        assert notifications[0].message == "Bob left you 1 star feedback"

    @pytest.mark.asyncio
    async def test_second_submission_from_same_party_is_refused(self, unit_env):
        alice, _, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)
        await feedback_service.submit_feedback(swap.id, alice, 5, "Great")

        with pytest.raises(InvalidStateError, match="already submitted"):
            await feedback_service.submit_feedback(swap.id, alice, 3, "Changed my mind")

    @pytest.mark.asyncio
    async def test_both_parties_may_rate_each_other(self, unit_env):
        alice, bob, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)
        swap_repo = await unit_env.get(SwapRequestRepository)

        await feedback_service.submit_feedback(swap.id, alice, 5, "Great")
        await feedback_service.submit_feedback(swap.id, bob, 4, "Good")

        stored = await swap_repo.find_by_id(swap.id)
        assert stored.feedback_submitted.is_submitted(FeedbackDirection.FROM_USER)
        assert stored.feedback_submitted.is_submitted(FeedbackDirection.TO_USER)

        entries = await feedback_service.feedback_for_swap(swap.id, alice.id)
        assert {e.direction for e in entries} == {
            FeedbackDirection.FROM_USER,
            FeedbackDirection.TO_USER,
        }

    @pytest.mark.asyncio
    async def test_feedback_requires_completed_swap(self, unit_env):
        account_repo = await unit_env.get(AccountRepository)
        swap_repo = await unit_env.get(SwapRequestRepository)
        feedback_service = await unit_env.get(FeedbackService)
        alice = await account_repo.save(make_account(name="Alice"))
        bob = await account_repo.save(make_account(name="Bob"))
        swap = await swap_repo.create(
            make_swap(from_account_id=alice.id, to_account_id=bob.id)
        )

        with pytest.raises(InvalidStateError, match="completed swaps"):
            await feedback_service.submit_feedback(
                swap.id, Actor(id=alice.id, name=alice.name), 5, "Great"
            )

    @pytest.mark.asyncio
    async def test_outsider_cannot_rate(self, unit_env):
        _, _, swap = await _completed_swap(unit_env)
        account_repo = await unit_env.get(AccountRepository)
        feedback_service = await unit_env.get(FeedbackService)
        eve = await account_repo.save(make_account(name="Eve"))

        with pytest.raises(NotAuthorizedError, match="not part of this swap"):
            await feedback_service.submit_feedback(
                swap.id, Actor(id=eve.id, name=eve.name), 5, "Great"
            )


class TestEditWindow:
    """Edits and withdrawals are limited to the first day after posting."""

    @pytest.mark.asyncio
    async def test_update_within_window(self, unit_env):
        alice, bob, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)
        account_repo = await unit_env.get(AccountRepository)
        entry = await feedback_service.submit_feedback(swap.id, alice, 2, "Meh")

        updated = await feedback_service.update_feedback(
            entry.id, alice, stars=5, now=entry.created_at + timedelta(hours=23)
        )

        assert updated.stars == 5
        assert updated.comment == "Meh"
        rated = await account_repo.find_by_id(bob.id)
        assert rated.rating_sum == 5
        assert rated.rating_count == 1

    @pytest.mark.asyncio
    async def test_update_after_window_is_refused(self, unit_env):
        alice, _, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)
        entry = await feedback_service.submit_feedback(swap.id, alice, 2, "Meh")

        with pytest.raises(InvalidStateError, match="within 24 hours"):
            await feedback_service.update_feedback(
                entry.id, alice, stars=5, now=entry.created_at + timedelta(hours=25)
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "age,allowed",
        [
            (timedelta(hours=23, minutes=59, seconds=59), True),
            (timedelta(hours=24, seconds=1), False),
        ],
    )
    async def test_update_window_boundary(self, unit_env, age, allowed):
        alice, _, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)
        entry = await feedback_service.submit_feedback(swap.id, alice, 2, "Meh")

        if allowed:
            updated = await feedback_service.update_feedback(
                entry.id, alice, comment="Better", now=entry.created_at + age
            )
            assert updated.comment == "Better"
        else:
            with pytest.raises(InvalidStateError, match="within 24 hours"):
                await feedback_service.update_feedback(
                    entry.id, alice, comment="Better", now=entry.created_at + age
                )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "age,allowed",
        [
            (timedelta(hours=23, minutes=59, seconds=59), True),
            (timedelta(hours=24, seconds=1), False),
        ],
    )
    async def test_delete_window_boundary(self, unit_env, age, allowed):
        alice, bob, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)
        account_repo = await unit_env.get(AccountRepository)
        entry = await feedback_service.submit_feedback(swap.id, alice, 2, "Meh")

        if allowed:
            await feedback_service.delete_feedback(
                entry.id, alice, now=entry.created_at + age
            )
            assert (await account_repo.find_by_id(bob.id)).rating_count == 0
        else:
            with pytest.raises(InvalidStateError, match="within 24 hours"):
                await feedback_service.delete_feedback(
                    entry.id, alice, now=entry.created_at + age
                )
            assert (await account_repo.find_by_id(bob.id)).rating_count == 1

    @pytest.mark.asyncio
    async def test_only_author_may_delete(self, unit_env):
        alice, bob, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)
        entry = await feedback_service.submit_feedback(swap.id, alice, 2, "Meh")

        with pytest.raises(NotAuthorizedError):
            await feedback_service.delete_feedback(entry.id, bob)

    @pytest.mark.asyncio
    async def test_delete_reverts_rating(self, unit_env):
        alice, bob, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)
        account_repo = await unit_env.get(AccountRepository)
        entry = await feedback_service.submit_feedback(swap.id, alice, 2, "Meh")

        await feedback_service.delete_feedback(entry.id, alice)

        rated = await account_repo.find_by_id(bob.id)
        assert rated.rating_count == 0
        assert rated.rating_sum == 0
        assert rated.find_feedback(entry.id) is None


class TestModerationAndListings:
    @pytest.mark.asyncio
    async def test_remove_feedback_ignores_window(self, unit_env):
        alice, bob, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)
        account_repo = await unit_env.get(AccountRepository)
        entry = await feedback_service.submit_feedback(swap.id, alice, 1, "Rude")

        await feedback_service.remove_feedback(entry.id)

        rated = await account_repo.find_by_id(bob.id)
        assert rated.rating_count == 0

    @pytest.mark.asyncio
    async def test_remove_unknown_feedback_is_not_found(self, unit_env):
        feedback_service = await unit_env.get(FeedbackService)
        with pytest.raises(NotFoundError):
            await feedback_service.remove_feedback(FeedbackId(uuid4()))

    @pytest.mark.asyncio
    async def test_pending_feedback_drops_rated_swaps(self, unit_env):
        alice, bob, swap = await _completed_swap(unit_env)
        feedback_service = await unit_env.get(FeedbackService)

        before, before_total = await feedback_service.pending_feedback(
            alice.id, PageRequest()
        )
        await feedback_service.submit_feedback(swap.id, alice, 5, "Great")
        after, after_total = await feedback_service.pending_feedback(
            alice.id, PageRequest()
        )
        still_owed, _ = await feedback_service.pending_feedback(bob.id, PageRequest())

        assert [s.id for s in before] == [swap.id]
        assert before_total == 1
        assert after == []
        assert after_total == 0
        assert [s.id for s in still_owed] == [swap.id]
