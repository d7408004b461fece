"""Get profile use case."""

from uuid import UUID

from pydantic import BaseModel

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ProfileView
from skillswap.domain.service import AccountService
from skillswap.domain.value import AccountId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    account_id: str
    viewer_id: str | None = None  # Authenticated caller, if any


class GetProfileUseCase(BaseUseCase[GetProfileRequest, ProfileView]):
    """Use case for viewing another account's profile."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: GetProfileRequest) -> ProfileView:
        """Get a profile with its five most recent feedback entries.

        Raises:
            NotFoundError: If the account does not exist or is banned
            NotAuthorizedError: If the profile is private
        """
        account = await self.account_service.view_profile(
            AccountId(UUID(request.account_id)),
            viewer_id=AccountId(UUID(request.viewer_id)) if request.viewer_id else None,
        )
        return ProfileView.from_account(account)
