"""Delete account use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from skillswap.application.usecase.base import BaseUseCase
from skillswap.domain.service import AccountService, MediaStorage
from skillswap.domain.value import AccountId

from .profile_photo import discard_photo


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    account_id: str


class DeleteAccountUseCase(BaseUseCase[DeleteAccountRequest, None]):
    """Use case for deleting an account and everything that references it.

    Shared by self-service deletion and admin deletion.
    """

    def __init__(
        self, account_service: AccountService, media_storage: MediaStorage
    ) -> None:
        """Initialize delete account use case.

        Args:
            account_service: Account domain service (owns the cascade)
            media_storage: Image storage for the profile photo
        """
        self.account_service = account_service
        self.media_storage = media_storage

    async def execute(self, request: DeleteAccountRequest) -> None:
        """Execute delete account flow.

        Raises:
            NotFoundError: If the account does not exist
        """
        with logfire.span("delete_account.execute", account_id=request.account_id):
            account = await self.account_service.delete_account(
                AccountId(UUID(request.account_id))
            )
            await discard_photo(self.media_storage, account.profile_photo)
