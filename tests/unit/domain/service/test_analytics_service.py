"""Unit tests for AnalyticsService."""

from datetime import datetime, timezone

import pytest

from skillswap.domain.repository import AccountRepository, SwapRequestRepository
from skillswap.domain.service import AnalyticsService, period_start
from skillswap.domain.value import PageRequest, ReportKind, ReportPeriod, SwapStatus
from tests.factories import make_account, make_swap
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

NOW = datetime(2024, 3, 14, 15, 9, 26, tzinfo=timezone.utc)


class TestPeriodStart:
    @pytest.mark.parametrize(
        "period,expected",
        [
            (ReportPeriod.DAY, datetime(2024, 3, 14, tzinfo=timezone.utc)),
            (ReportPeriod.WEEK, datetime(2024, 3, 7, 15, 9, 26, tzinfo=timezone.utc)),
            (ReportPeriod.MONTH, datetime(2024, 3, 1, tzinfo=timezone.utc)),
            (ReportPeriod.YEAR, datetime(2024, 1, 1, tzinfo=timezone.utc)),
        ],
    )
    def test_window_start(self, period, expected):
        assert period_start(period, NOW) == expected


class TestDashboard:
    @pytest.mark.asyncio
    async def test_counts(self, unit_env):
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        swap_repo = await unit_env.get(SwapRequestRepository)
        analytics_service = await unit_env.get(AnalyticsService)
        alice = await account_repo.save(make_account(name="Alice"))
        bob = await account_repo.save(make_account(name="Bob"))
        await account_repo.save(make_account(name="Mallory", is_banned=True))
        await swap_repo.create(make_swap(from_account_id=alice.id, to_account_id=bob.id))
        await swap_repo.create(
            make_swap(
                from_account_id=bob.id,
                to_account_id=alice.id,
                status=SwapStatus.COMPLETED,
            )
        )

        # Act
        stats = await analytics_service.dashboard()

        # Assert
        assert stats.total_users == 3
        assert stats.banned_users == 1
        assert stats.active_users == 2
        assert stats.total_swaps == 2
        assert stats.pending_swaps == 1
        assert stats.completed_swaps == 1
        assert len(stats.recent_users) == 3


class TestReports:
    @pytest.mark.asyncio
    async def test_users_report_rows(self, unit_env):
        account_repo = await unit_env.get(AccountRepository)
        analytics_service = await unit_env.get(AnalyticsService)
        await account_repo.save(
            make_account(name="Alice", email="alice@example.com", skills_offered=["Chess"])
        )

        rows, total = await analytics_service.report_rows(ReportKind.USERS, PageRequest())

        assert total == 1
        assert rows[0]["email"] == "alice@example.com"
        assert rows[0]["skillsOffered"] == ["Chess"]
        assert rows[0]["averageRating"] == 0.0
