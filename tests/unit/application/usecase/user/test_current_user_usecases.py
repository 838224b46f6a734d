"""Unit tests for the current user use cases."""

from uuid import uuid4

import pytest

from eats.application.usecase.user import (
    CreateCurrentUserUseCase,
    GetCurrentUserUseCase,
    UpdateCurrentUserUseCase,
)
from eats.application.usecase.user.create_current_user import CreateCurrentUserRequest
from eats.application.usecase.user.get_current_user import GetCurrentUserRequest
from eats.application.usecase.user.update_current_user import (
    UpdateCurrentUserForm,
    UpdateCurrentUserRequest,
)
from eats.domain.error import NotFoundError
from eats.domain.repository import UserRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCurrentUserUseCase:
    @pytest.mark.asyncio
    async def test_accepts_camel_case_payload(self, unit_env):
        """The frontend posts camelCase keys."""
        use_case = await unit_env.get(CreateCurrentUserUseCase)
        request = CreateCurrentUserRequest.model_validate(
            {"auth0Id": "auth0|abc", "email": "a@x.io", "addressLine1": "1 Main St"}
        )

        response = await use_case.execute(request)

        assert response.created is True
        assert response.user.auth0_id == "auth0|abc"
        assert response.user.address_line1 == "1 Main St"

    @pytest.mark.asyncio
    async def test_repeat_reports_not_created(self, unit_env):
        use_case = await unit_env.get(CreateCurrentUserUseCase)
        user_repo = await unit_env.get(UserRepository)
        request = CreateCurrentUserRequest(auth0_id="auth0|abc", email="a@x.io")

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.created is True
        assert second.created is False
        assert second.user.id == first.user.id
        assert len(user_repo.all()) == 1

    def test_request_serializes_with_frontend_names(self):
        request = CreateCurrentUserRequest(auth0_id="auth0|abc", email="a@x.io")

        assert request.model_dump(by_alias=True)["auth0Id"] == "auth0|abc"


class TestGetCurrentUserUseCase:
    @pytest.mark.asyncio
    async def test_returns_account(self, unit_env):
        create = await unit_env.get(CreateCurrentUserUseCase)
        get = await unit_env.get(GetCurrentUserUseCase)
        created = await create.execute(
            CreateCurrentUserRequest(auth0_id="auth0|abc", email="a@x.io")
        )

        response = await get.execute(GetCurrentUserRequest(user_id=created.user.id))

        assert response == created.user
        assert response.model_dump(by_alias=True)["_id"] == created.user.id

    @pytest.mark.asyncio
    async def test_missing_account_raises(self, unit_env):
        get = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(NotFoundError):
            await get.execute(GetCurrentUserRequest(user_id=str(uuid4())))


class TestUpdateCurrentUserUseCase:
    @pytest.mark.asyncio
    async def test_overwrites_profile(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCurrentUserUseCase)
        update = await unit_env.get(UpdateCurrentUserUseCase)
        created = await create.execute(
            CreateCurrentUserRequest(
                auth0_id="auth0|abc", email="a@x.io", city="Paris"
            )
        )
        form = UpdateCurrentUserForm.model_validate(
            {"name": "Ada", "addressLine1": "1 Main St", "country": "UK"}
        )

        # Act
        response = await update.execute(
            UpdateCurrentUserRequest(user_id=created.user.id, form=form)
        )

        # Assert
        assert response.name == "Ada"
        assert response.address_line1 == "1 Main St"
        assert response.city is None
        assert response.country == "UK"
        assert response.auth0_id == "auth0|abc"

    @pytest.mark.asyncio
    async def test_missing_account_raises_and_writes_nothing(self, unit_env):
        update = await unit_env.get(UpdateCurrentUserUseCase)
        user_repo = await unit_env.get(UserRepository)

        with pytest.raises(NotFoundError):
            await update.execute(
                UpdateCurrentUserRequest(
                    user_id=str(uuid4()), form=UpdateCurrentUserForm(name="Ada")
                )
            )
        assert user_repo.all() == []
