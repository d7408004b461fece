"""Update profile use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import PrivateProfileView
from skillswap.domain.service import AccountService
from skillswap.domain.value import AccountId, Availability


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Only fields that were explicitly provided are changed.
    """

    account_id: str  # From authenticated user
    name: str | None = Field(default=None, min_length=1, max_length=50)
    location: str | None = Field(default=None, max_length=100)
    skills_offered: list[str] | None = None
    skills_wanted: list[str] | None = None
    availability: Availability | None = None
    is_public: bool | None = None


class UpdateAvailabilityRequest(BaseModel):
    """Update availability request."""

    account_id: str
    availability: Availability


class UpdateProfileUseCase(BaseUseCase[UpdateProfileRequest, PrivateProfileView]):
    """Use case for editing the caller's own profile.

    Email, rating and moderation flags cannot be changed here.
    """

    def __init__(self, account_service: AccountService) -> None:
        """Initialize update profile use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: UpdateProfileRequest) -> PrivateProfileView:
        """Execute update profile flow.

        Raises:
            NotFoundError: If the account does not exist
        """
        changes = request.model_dump(exclude_unset=True, exclude={"account_id"})
        # Only location can be cleared with null
        for field in ("name", "is_public", "skills_offered", "skills_wanted", "availability"):
            if changes.get(field, ...) is None:
                changes.pop(field)

        with logfire.span(
            "update_profile.execute",
            account_id=request.account_id,
            fields=sorted(changes),
        ):
            account = await self.account_service.update_profile(
                AccountId(UUID(request.account_id)), **changes
            )
            return PrivateProfileView.from_account(account)


class UpdateAvailabilityUseCase(
    BaseUseCase[UpdateAvailabilityRequest, PrivateProfileView]
):
    """Use case for the quick availability toggle."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: UpdateAvailabilityRequest) -> PrivateProfileView:
        account = await self.account_service.update_profile(
            AccountId(UUID(request.account_id)), availability=request.availability
        )
        return PrivateProfileView.from_account(account)
