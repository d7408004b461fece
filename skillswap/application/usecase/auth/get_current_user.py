"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import PrivateProfileView
from skillswap.domain.service import AccountService
from skillswap.domain.value import AccountId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    account_id: str  # From authenticated token


class GetCurrentUserUseCase(BaseUseCase[GetCurrentUserRequest, PrivateProfileView]):
    """Use case for the authenticated account's own profile."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: GetCurrentUserRequest) -> PrivateProfileView:
        account = await self.account_service.get_by_id(
            AccountId(UUID(request.account_id))
        )
        return PrivateProfileView.from_account(account)
