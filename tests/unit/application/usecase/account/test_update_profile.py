"""Unit tests for UpdateProfileUseCase."""

import pytest

from skillswap.application.usecase.account import (
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from skillswap.domain.repository import AccountRepository
from skillswap.domain.value import Availability
from tests.factories import make_account
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateProfileUseCase:
    """Tests for UpdateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_only_provided_fields_change(self, unit_env):
        """Should leave omitted fields untouched."""
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(UpdateProfileUseCase)
        account = await account_repo.save(
            make_account(location="Dublin", skills_wanted=["Chess"])
        )

        # Act
        view = await use_case.execute(
            UpdateProfileRequest(account_id=str(account.id), skills_offered=["Baking"])
        )

        # Assert
        assert view.skills_offered == ["Baking"]
        assert view.skills_wanted == ["Chess"]
        assert view.location == "Dublin"
        assert view.email == account.email.root

    @pytest.mark.asyncio
    async def test_location_can_be_cleared(self, unit_env):
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(UpdateProfileUseCase)
        account = await account_repo.save(make_account(location="Dublin"))

        view = await use_case.execute(
            UpdateProfileRequest(account_id=str(account.id), location=None)
        )

        assert view.location is None

    @pytest.mark.asyncio
    async def test_null_name_is_ignored(self, unit_env):
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(UpdateProfileUseCase)
        account = await account_repo.save(make_account(name="Ada"))

        view = await use_case.execute(
            UpdateProfileRequest(
                account_id=str(account.id), name=None, availability=Availability.BUSY
            )
        )

        assert view.name == "Ada"
        assert view.availability is Availability.BUSY
