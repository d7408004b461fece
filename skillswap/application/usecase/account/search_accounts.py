"""Search accounts use case."""

import logfire
from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import AccountSummary, ApiModel, Pagination
from skillswap.domain.repository import AccountSearch
from skillswap.domain.service import AccountService
from skillswap.domain.value import Availability, PageRequest


class SearchAccountsRequest(BaseModel):
    """Search accounts request."""

    q: str | None = Field(default=None, max_length=100)
    skills_offered: list[str] = Field(default_factory=list)
    skills_wanted: list[str] = Field(default_factory=list)
    availability: Availability | None = None
    location: str | None = Field(default=None, max_length=100)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=50)


class SearchAccountsResponse(ApiModel):
    """Search accounts response."""

    users: list[AccountSummary]
    pagination: Pagination


class SearchAccountsUseCase(BaseUseCase[SearchAccountsRequest, SearchAccountsResponse]):
    """Use case for searching the public directory.

    Results are ordered by average rating, then newest first. Private and
    banned accounts never appear.
    """

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: SearchAccountsRequest) -> SearchAccountsResponse:
        with logfire.span(
            "search_accounts.execute", q=request.q, page=request.page
        ):
            page = PageRequest(page=request.page, limit=request.limit)
            criteria = AccountSearch(
                text=(request.q or "").strip() or None,
                skills_offered=[s.strip() for s in request.skills_offered if s.strip()],
                skills_wanted=[s.strip() for s in request.skills_wanted if s.strip()],
                availability=request.availability,
                location=(request.location or "").strip() or None,
            )
            accounts, total = await self.account_service.search(criteria, page)
            return SearchAccountsResponse(
                users=[AccountSummary.from_account(account) for account in accounts],
                pagination=Pagination.of(page, total),
            )
