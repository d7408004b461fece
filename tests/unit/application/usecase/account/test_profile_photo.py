"""Unit tests for profile photo use cases."""

import pytest

from skillswap.adapter.media.cloudinary import MockMediaStorage
from skillswap.application.usecase.account import (
    RemoveProfilePhotoRequest,
    RemoveProfilePhotoUseCase,
    UploadProfilePhotoRequest,
    UploadProfilePhotoUseCase,
)
from skillswap.domain.error import ValidationError
from skillswap.domain.repository import AccountRepository
from tests.factories import make_account
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64


class TestUploadProfilePhotoUseCase:
    """Tests for UploadProfilePhotoUseCase."""

    @pytest.mark.asyncio
    async def test_upload_replaces_previous_photo(self, unit_env):
        """The old image is deleted once the new one is stored."""
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        storage = await unit_env.get(MockMediaStorage)
        use_case = await unit_env.get(UploadProfilePhotoUseCase)
        account = await account_repo.save(make_account())
        request = UploadProfilePhotoRequest(
            account_id=str(account.id), content=JPEG_BYTES, content_type="image/jpeg"
        )
        first = await use_case.execute(request)

        # Act
        second = await use_case.execute(request)

        # Assert
        assert second.profile_photo != first.profile_photo
        assert second.profile_photo.endswith(".jpg")
        assert len(storage.stored) == 1
        assert len(storage.deleted) == 1
        assert (await account_repo.find_by_id(account.id)).profile_photo == (
            second.profile_photo
        )

    @pytest.mark.asyncio
    async def test_non_image_is_rejected(self, unit_env):
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(UploadProfilePhotoUseCase)
        account = await account_repo.save(make_account())

        with pytest.raises(ValidationError, match="Only image files"):
            await use_case.execute(
                UploadProfilePhotoRequest(
                    account_id=str(account.id),
                    content=b"%PDF-1.7",
                    content_type="application/pdf",
                )
            )

    @pytest.mark.asyncio
    async def test_oversized_upload_is_rejected(self, unit_env):
        account_repo = await unit_env.get(AccountRepository)
        storage = await unit_env.get(MockMediaStorage)
        use_case = await unit_env.get(UploadProfilePhotoUseCase)
        account = await account_repo.save(make_account())

        with pytest.raises(ValidationError, match="maximum size is 5MB"):
            await use_case.execute(
                UploadProfilePhotoRequest(
                    account_id=str(account.id),
                    content=b"\x00" * (5 * 1024 * 1024 + 1),
                    content_type="image/png",
                )
            )
        assert storage.stored == {}


class TestRemoveProfilePhotoUseCase:
    @pytest.mark.asyncio
    async def test_remove_clears_url_and_deletes_image(self, unit_env):
        account_repo = await unit_env.get(AccountRepository)
        storage = await unit_env.get(MockMediaStorage)
        upload = await unit_env.get(UploadProfilePhotoUseCase)
        remove = await unit_env.get(RemoveProfilePhotoUseCase)
        account = await account_repo.save(make_account())
        await upload.execute(
            UploadProfilePhotoRequest(
                account_id=str(account.id), content=JPEG_BYTES, content_type="image/jpeg"
            )
        )

        response = await remove.execute(RemoveProfilePhotoRequest(account_id=str(account.id)))

        assert response.profile_photo is None
        assert storage.stored == {}
