"""Read-only aggregate reports for the admin panel."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

import logfire

from skillswap.domain.model import Account, SwapRequest
from skillswap.domain.model.common import utc_now
from skillswap.domain.repository import (
    AccountListing,
    AccountRepository,
    NotificationRepository,
    SwapRequestRepository,
)
from skillswap.domain.value import (
    NotificationType,
    PageRequest,
    ReportKind,
    ReportPeriod,
    SwapStatus,
)

from .base import Service


def period_start(period: ReportPeriod, now: datetime) -> datetime:
    """Start of the analytics window ending at ``now``.

    Day, month and year windows start at the calendar boundary; the week
    window is the last seven days.
    """
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period is ReportPeriod.DAY:
        return midnight
    if period is ReportPeriod.WEEK:
        return now - timedelta(days=7)
    if period is ReportPeriod.MONTH:
        return midnight.replace(day=1)
    return midnight.replace(month=1, day=1)


@dataclass
class DashboardStats:
    """Headline numbers for the admin dashboard."""

    total_users: int
    active_users: int
    banned_users: int
    total_swaps: int
    pending_swaps: int
    completed_swaps: int
    total_notifications: int
    recent_users: list[Account] = field(default_factory=list)
    recent_swaps: list[SwapRequest] = field(default_factory=list)


@dataclass
class AnalyticsReport:
    """Time-windowed activity counts and catalogue breakdowns."""

    period: ReportPeriod
    start: datetime
    new_users: int
    new_swaps: int
    completed_swaps: int
    swaps_by_status: dict[SwapStatus, int]
    notifications_by_type: dict[NotificationType, int]
    top_skills_offered: list[tuple[str, int]]
    top_skills_wanted: list[tuple[str, int]]


class AnalyticsService(Service):
    """Domain service producing dashboards, analytics and report rows."""

    def __init__(
        self,
        account_repository: AccountRepository,
        swap_repository: SwapRequestRepository,
        notification_repository: NotificationRepository,
    ) -> None:
        self.account_repository = account_repository
        self.swap_repository = swap_repository
        self.notification_repository = notification_repository

    async def dashboard(self) -> DashboardStats:
        with logfire.span("analytics_service.dashboard"):
            total_users = await self.account_repository.count()
            banned_users = await self.account_repository.count(is_banned=True)
            by_status = await self.swap_repository.count_by_status()
            return DashboardStats(
                total_users=total_users,
                active_users=total_users - banned_users,
                banned_users=banned_users,
                total_swaps=sum(by_status.values()),
                pending_swaps=by_status[SwapStatus.PENDING],
                completed_swaps=by_status[SwapStatus.COMPLETED],
                total_notifications=await self.notification_repository.count(),
                recent_users=await self.account_repository.find_recent(5),
                recent_swaps=await self.swap_repository.find_recent(5),
            )

    async def analytics(
        self, period: ReportPeriod = ReportPeriod.MONTH, now: datetime | None = None
    ) -> AnalyticsReport:
        """Activity since the start of ``period``.

        Completed swaps are counted by completion time, not creation time.
        """
        start = period_start(period, now or utc_now())
        with logfire.span(
            "analytics_service.analytics", period=period.value, start=start.isoformat()
        ):
            return AnalyticsReport(
                period=period,
                start=start,
                new_users=await self.account_repository.count(created_since=start),
                new_swaps=await self.swap_repository.count(created_since=start),
                completed_swaps=await self.swap_repository.count(completed_since=start),
                swaps_by_status=await self.swap_repository.count_by_status(),
                notifications_by_type=await self.notification_repository.count_by_type(),
                top_skills_offered=await self.account_repository.top_skills("offered", 10),
                top_skills_wanted=await self.account_repository.top_skills("wanted", 10),
            )

    async def report_rows(
        self, kind: ReportKind, page: PageRequest
    ) -> tuple[list[dict[str, Any]], int]:
        """Flat rows for an export, one page at a time.

        Returns:
            Tuple of (rows, total rows)
        """
        with logfire.span("analytics_service.report_rows", kind=kind.value, page=page.page):
            if kind is ReportKind.USERS:
                accounts, total = await self.account_repository.list_accounts(
                    AccountListing(), page
                )
                return [
                    {
                        "id": str(account.id),
                        "name": account.name,
                        "email": account.email.root,
                        "location": account.location,
                        "skillsOffered": list(account.skills_offered),
                        "skillsWanted": list(account.skills_wanted),
                        "availability": account.availability.value,
                        "isPublic": account.is_public,
                        "isBanned": account.is_banned,
                        "isVerified": account.is_verified,
                        "averageRating": account.average_rating,
                        "ratingCount": account.rating_count,
                        "createdAt": account.created_at.isoformat(),
                    }
                    for account in accounts
                ], total

            if kind is ReportKind.SWAPS:
                swaps, total = await self.swap_repository.list_all(page)
                return [
                    {
                        "id": str(swap.id),
                        "fromUser": str(swap.from_account_id),
                        "toUser": str(swap.to_account_id),
                        "skillsOffered": list(swap.skills_offered),
                        "skillsRequested": list(swap.skills_requested),
                        "status": swap.status.value,
                        "createdAt": swap.created_at.isoformat(),
                        "acceptedAt": swap.accepted_at.isoformat()
                        if swap.accepted_at
                        else None,
                        "completedAt": swap.completed_at.isoformat()
                        if swap.completed_at
                        else None,
                    }
                    for swap in swaps
                ], total

            entries, total = await self.account_repository.list_feedback(page)
            return [
                {
                    "id": str(entry.id),
                    "toUser": str(account_id),
                    "fromUser": str(entry.from_account_id),
                    "fromName": entry.from_name,
                    "swapId": str(entry.swap_id) if entry.swap_id else None,
                    "stars": entry.stars,
                    "comment": entry.comment,
                    "createdAt": entry.created_at.isoformat(),
                }
                for account_id, entry in entries
            ], total
