"""Profile photo use cases."""

import os
import tempfile
from pathlib import Path
from uuid import UUID

import logfire
from pydantic import BaseModel

from skillswap.adapter.error import MediaStorageError
from skillswap.application.usecase.base import BaseUseCase
from skillswap.application.usecase.views import ApiModel
from skillswap.config import MediaSettings
from skillswap.domain.error import ValidationError
from skillswap.domain.service import AccountService, MediaStorage
from skillswap.domain.value import AccountId

# Accepted upload content types and the suffix stored with them
IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


class UploadProfilePhotoRequest(BaseModel):
    """Upload profile photo request."""

    account_id: str
    content: bytes
    content_type: str | None = None


class RemoveProfilePhotoRequest(BaseModel):
    account_id: str


class ProfilePhotoResponse(ApiModel):
    profile_photo: str | None


async def discard_photo(media_storage: MediaStorage, url: str | None) -> None:
    """Delete a stored photo, logging instead of failing."""
    if not url:
        return
    try:
        await media_storage.delete(url)
    except MediaStorageError as e:
        logfire.warn("Failed to delete stored photo", url=url, error=str(e))


class UploadProfilePhotoUseCase(
    BaseUseCase[UploadProfilePhotoRequest, ProfilePhotoResponse]
):
    """Use case for replacing the caller's profile photo.

    The new image is stored first; the previous one is deleted afterwards
    and a failed deletion leaves the account unaffected.
    """

    def __init__(
        self,
        account_service: AccountService,
        media_storage: MediaStorage,
        settings: MediaSettings,
    ) -> None:
        """Initialize upload profile photo use case.

        Args:
            account_service: Account domain service
            media_storage: Image storage
            settings: Media settings (upload limits)
        """
        self.account_service = account_service
        self.media_storage = media_storage
        self.settings = settings

    async def execute(self, request: UploadProfilePhotoRequest) -> ProfilePhotoResponse:
        """Execute upload flow.

        Raises:
            ValidationError: If the file is empty, too large or not an image
            MediaStorageError: If the storage upload fails
        """
        suffix = IMAGE_TYPES.get((request.content_type or "").lower())
        if suffix is None:
            raise ValidationError("Only image files are allowed")
        if not request.content:
            raise ValidationError("No file uploaded")
        if len(request.content) > self.settings.max_upload_bytes:
            limit_mb = self.settings.max_upload_bytes // (1024 * 1024)
            raise ValidationError(f"File too large, maximum size is {limit_mb}MB")

        account_id = AccountId(UUID(request.account_id))
        with logfire.span(
            "upload_profile_photo.execute",
            account_id=request.account_id,
            size=len(request.content),
        ):
            # Fail before touching storage if the account is gone
            await self.account_service.get_by_id(account_id)

            fd, name = tempfile.mkstemp(suffix=suffix, prefix="skillswap-photo-")
            path = Path(name)
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(request.content)
                url = await self.media_storage.upload(path)
            finally:
                path.unlink(missing_ok=True)

            account, previous = await self.account_service.set_profile_photo(
                account_id, url
            )
            await discard_photo(self.media_storage, previous)
            logfire.info("Profile photo uploaded", account_id=request.account_id)
            return ProfilePhotoResponse(profile_photo=account.profile_photo)


class RemoveProfilePhotoUseCase(
    BaseUseCase[RemoveProfilePhotoRequest, ProfilePhotoResponse]
):
    """Use case for clearing the caller's profile photo."""

    def __init__(
        self, account_service: AccountService, media_storage: MediaStorage
    ) -> None:
        self.account_service = account_service
        self.media_storage = media_storage

    async def execute(self, request: RemoveProfilePhotoRequest) -> ProfilePhotoResponse:
        account, previous = await self.account_service.set_profile_photo(
            AccountId(UUID(request.account_id)), None
        )
        await discard_photo(self.media_storage, previous)
        return ProfilePhotoResponse(profile_photo=account.profile_photo)
