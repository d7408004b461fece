"""Unit tests for the account aggregate and its rating invariant."""

from datetime import timedelta
from uuid import uuid4

import pytest
from pydantic import ValidationError

from skillswap.domain.model.common import utc_now
from skillswap.domain.value import AccountId, FeedbackId
from tests.factories import make_account, make_feedback


class TestRatingAggregate:
    """Tests for rating sum/count bookkeeping."""

    def test_new_account_has_zero_average(self):
        account = make_account()

        assert account.average_rating == 0.0
        assert account.rating_count == 0

    def test_add_feedback_updates_aggregate(self):
        account = make_account().add_feedback(make_feedback(5)).add_feedback(
            make_feedback(4)
        )

        assert account.rating_count == 2
        assert account.rating_sum == 9
        assert account.average_rating == 4.5

    def test_average_is_rounded_to_one_decimal(self):
        account = make_account()
        for stars in (5, 4, 4):
            account = account.add_feedback(make_feedback(stars))

        assert account.average_rating == 4.3

    def test_revise_feedback_adjusts_sum(self):
        entry = make_feedback(2)
        account = make_account().add_feedback(entry)

        revised = account.revise_feedback(entry.id, stars=5)

        assert revised.rating_sum == 5
        assert revised.rating_count == 1
        assert revised.find_feedback(entry.id).comment == entry.comment

    def test_remove_feedback_decrements_aggregate(self):
        keep, drop = make_feedback(3), make_feedback(1)
        account = make_account().add_feedback(keep).add_feedback(drop)

        account = account.remove_feedback(drop.id)

        assert account.rating_count == 1
        assert account.rating_sum == 3

    def test_remove_unknown_feedback_raises_key_error(self):
        with pytest.raises(KeyError):
            make_account().remove_feedback(FeedbackId(uuid4()))

    def test_remove_feedback_from_rater(self):
        rater = AccountId(uuid4())
        account = (
            make_account()
            .add_feedback(make_feedback(5, from_account_id=rater))
            .add_feedback(make_feedback(2))
        )

        account = account.remove_feedback_from(rater)

        assert account.rating_count == 1
        assert account.rating_sum == 2

    def test_inconsistent_aggregate_is_rejected(self):
        with pytest.raises(ValidationError, match="rating_count"):
            make_account(rating_count=1, rating_sum=5)

    def test_recent_feedback_is_newest_first(self):
        now = utc_now()
        old = make_feedback(created_at=now - timedelta(days=2))
        new = make_feedback(created_at=now)
        account = make_account().add_feedback(old).add_feedback(new)

        assert [entry.id for entry in account.recent_feedback(5)] == [new.id, old.id]
        assert [entry.id for entry in account.recent_feedback(1)] == [new.id]


class TestProfileFields:
    def test_skills_are_deduplicated_case_insensitively(self):
        account = make_account(skills_offered=["Guitar", "guitar", " Piano "])

        assert account.skills_offered == ["Guitar", "Piano"]

    def test_email_is_normalized(self):
        account = make_account(email="  Ada@Example.COM ")

        assert account.email.root == "ada@example.com"

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "@example.com"])
    def test_invalid_email_is_rejected(self, email):
        with pytest.raises(ValidationError):
            make_account(email=email)

    def test_name_longer_than_50_characters_is_rejected(self):
        with pytest.raises(ValidationError):
            make_account(name="x" * 51)


class TestFeedbackEditWindow:
    def test_entry_is_editable_inside_window(self):
        entry = make_feedback()

        assert entry.is_editable(entry.created_at + timedelta(hours=23), timedelta(hours=24))

    def test_entry_is_frozen_after_window(self):
        entry = make_feedback()

        assert not entry.is_editable(
            entry.created_at + timedelta(hours=24, seconds=1), timedelta(hours=24)
        )
