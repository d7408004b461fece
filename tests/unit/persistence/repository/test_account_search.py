"""Unit tests for directory search ordering and filtering."""

from datetime import timedelta

import pytest

from skillswap.domain.model.common import utc_now
from skillswap.domain.repository import AccountSearch
from skillswap.domain.value import Availability, PageRequest
from skillswap.persistence.repository.inmemory import InMemoryAccountRepository
from tests.factories import make_account, make_feedback


def _rated(name: str, stars: int, **fields):
    return make_account(
        name,
        feedback=[make_feedback(stars)],
        rating_sum=stars,
        rating_count=1,
        **fields,
    )


class TestAccountSearch:
    """Unit tests for the public directory search."""

    @pytest.mark.asyncio
    async def test_orders_by_rating_then_newest(self):
        """Higher average rating wins; ties go to the newer account."""
        # Arrange
        repo = InMemoryAccountRepository()
        now = utc_now()
        await repo.save(_rated("Old Four", 4, created_at=now - timedelta(days=3)))
        await repo.save(_rated("New Four", 4, created_at=now))
        await repo.save(_rated("Five", 5, created_at=now - timedelta(days=9)))
        await repo.save(make_account("Unrated", created_at=now + timedelta(hours=1)))

        # Act
        accounts, total = await repo.search(AccountSearch(), PageRequest())

        # Assert
        assert total == 4
        assert [a.name for a in accounts] == ["Five", "New Four", "Old Four", "Unrated"]

    @pytest.mark.asyncio
    async def test_hides_private_and_banned_accounts(self):
        repo = InMemoryAccountRepository()
        await repo.save(make_account("Visible"))
        await repo.save(make_account("Hidden", is_public=False))
        await repo.save(make_account("Banned", is_banned=True, ban_reason="Spam"))

        accounts, total = await repo.search(AccountSearch(), PageRequest())

        assert total == 1
        assert accounts[0].name == "Visible"

    @pytest.mark.asyncio
    async def test_skill_filters_match_any_case_insensitively(self):
        # Arrange
        repo = InMemoryAccountRepository()
        await repo.save(make_account("Guitarist", skills_offered=["Guitar"]))
        await repo.save(make_account("Cook", skills_offered=["Cooking"]))
        await repo.save(make_account("Learner", skills_wanted=["guitar"]))

        # Act
        offered, _ = await repo.search(
            AccountSearch(skills_offered=["guitar", "Piano"]), PageRequest()
        )
        wanted, _ = await repo.search(
            AccountSearch(skills_wanted=["GUITAR"]), PageRequest()
        )

        # Assert
        assert [a.name for a in offered] == ["Guitarist"]
        assert [a.name for a in wanted] == ["Learner"]

    @pytest.mark.asyncio
    async def test_text_location_and_availability(self):
        # Arrange
        repo = InMemoryAccountRepository()
        await repo.save(make_account("Ana", location="Lisbon", skills_offered=["Surf"]))
        await repo.save(
            make_account(
                "Ben", location="Berlin", availability=Availability.BUSY
            )
        )

        # Act
        by_text, _ = await repo.search(AccountSearch(text="surf"), PageRequest())
        by_location, _ = await repo.search(
            AccountSearch(location="berl"), PageRequest()
        )
        by_availability, _ = await repo.search(
            AccountSearch(availability=Availability.AVAILABLE), PageRequest()
        )

        # Assert
        assert [a.name for a in by_text] == ["Ana"]
        assert [a.name for a in by_location] == ["Ben"]
        assert [a.name for a in by_availability] == ["Ana"]

    @pytest.mark.asyncio
    async def test_paginates_after_filtering(self):
        repo = InMemoryAccountRepository()
        for i in range(5):
            await repo.save(make_account(f"User {i}"))

        accounts, total = await repo.search(
            AccountSearch(), PageRequest(page=2, limit=2)
        )

        assert total == 5
        assert len(accounts) == 2
