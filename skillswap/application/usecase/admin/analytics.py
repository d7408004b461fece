"""Admin analytics and report use cases."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ApiModel, Pagination
from skillswap.domain.service import AdminService, AnalyticsService
from skillswap.domain.value import (
    AdminId,
    PageRequest,
    Permission,
    ReportKind,
    ReportPeriod,
)


class GetAnalyticsRequest(BaseModel):
    admin_id: str
    period: ReportPeriod = ReportPeriod.MONTH


class SkillCount(ApiModel):
    skill: str
    count: int


class AnalyticsResponse(ApiModel):
    """Activity since the start of the requested period."""

    period: ReportPeriod
    start: datetime
    new_users: int
    new_swaps: int
    completed_swaps: int
    swaps_by_status: dict[str, int]
    notifications_by_type: dict[str, int]
    top_skills_offered: list[SkillCount]
    top_skills_wanted: list[SkillCount]


class GetReportRequest(BaseModel):
    admin_id: str
    kind: ReportKind
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=100, ge=1, le=500)


class ReportResponse(ApiModel):
    type: ReportKind
    rows: list[dict[str, Any]]
    pagination: Pagination


class GetAnalyticsUseCase(BaseUseCase[GetAnalyticsRequest, AnalyticsResponse]):
    def __init__(
        self, admin_service: AdminService, analytics_service: AnalyticsService
    ) -> None:
        self.admin_service = admin_service
        self.analytics_service = analytics_service

    async def execute(self, request: GetAnalyticsRequest) -> AnalyticsResponse:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.VIEW_ANALYTICS
        )
        report = await self.analytics_service.analytics(request.period)
        return AnalyticsResponse(
            period=report.period,
            start=report.start,
            new_users=report.new_users,
            new_swaps=report.new_swaps,
            completed_swaps=report.completed_swaps,
            swaps_by_status={s.value: n for s, n in report.swaps_by_status.items()},
            notifications_by_type={
                t.value: n for t, n in report.notifications_by_type.items()
            },
            top_skills_offered=[
                SkillCount(skill=skill, count=count)
                for skill, count in report.top_skills_offered
            ],
            top_skills_wanted=[
                SkillCount(skill=skill, count=count)
                for skill, count in report.top_skills_wanted
            ],
        )


class GetReportUseCase(BaseUseCase[GetReportRequest, ReportResponse]):
    """Use case for paging through export rows of users, swaps or feedback."""

    def __init__(
        self, admin_service: AdminService, analytics_service: AnalyticsService
    ) -> None:
        self.admin_service = admin_service
        self.analytics_service = analytics_service

    async def execute(self, request: GetReportRequest) -> ReportResponse:
        await self.admin_service.require_permission(
            AdminId(UUID(request.admin_id)), Permission.VIEW_REPORTS
        )
        page = PageRequest(page=request.page, limit=request.limit)
        rows, total = await self.analytics_service.report_rows(request.kind, page)
        return ReportResponse(
            type=request.kind, rows=rows, pagination=Pagination.of(page, total)
        )
