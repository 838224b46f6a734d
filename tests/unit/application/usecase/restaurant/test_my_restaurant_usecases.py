"""Unit tests for the restaurant owner use cases."""

from uuid import uuid4

import pytest

from eats.application.usecase.restaurant import (
    CreateMyRestaurantUseCase,
    GetMyRestaurantUseCase,
    UpdateMyRestaurantUseCase,
)
from eats.application.usecase.restaurant.common import RestaurantForm
from eats.application.usecase.restaurant.create_my_restaurant import (
    CreateMyRestaurantRequest,
)
from eats.application.usecase.restaurant.get_my_restaurant import (
    GetMyRestaurantRequest,
)
from eats.application.usecase.restaurant.update_my_restaurant import (
    UpdateMyRestaurantRequest,
)
from eats.domain.error import AlreadyExistsError, NotFoundError, ValidationError
from eats.domain.service import ImageUploader
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x01" * 32
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x02" * 32


def make_form(**overrides) -> RestaurantForm:
    data = {
        "restaurantName": "Luigi's",
        "city": "London",
        "country": "UK",
        "deliveryPrice": 2.5,
        "estimatedDeliveryTime": 30,
        "cuisines": ["Pizza", "Pasta"],
        "menuItems": [{"name": "Margherita", "price": 9.5}],
    }
    data.update(overrides)
    return RestaurantForm.model_validate(data)


class TestCreateMyRestaurantUseCase:
    @pytest.mark.asyncio
    async def test_creates_with_uploaded_image(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateMyRestaurantUseCase)
        uploader = await unit_env.get(ImageUploader)
        user_id = str(uuid4())

        # Act
        response = await use_case.execute(
            CreateMyRestaurantRequest(
                user_id=user_id,
                form=make_form(),
                image_data=PNG_BYTES,
                image_content_type="image/png",
            )
        )

        # Assert
        assert response.user == user_id
        assert response.restaurant_name == "Luigi's"
        assert response.cuisines == ["Pizza", "Pasta"]
        assert response.menu_items[0].name == "Margherita"
        assert response.menu_items[0].id  # Assigned on creation
        assert response.image_url.endswith(".png")
        assert len(uploader.uploads) == 1

    @pytest.mark.asyncio
    async def test_second_restaurant_rejected_before_upload(self, unit_env):
        use_case = await unit_env.get(CreateMyRestaurantUseCase)
        uploader = await unit_env.get(ImageUploader)
        request = CreateMyRestaurantRequest(
            user_id=str(uuid4()),
            form=make_form(),
            image_data=PNG_BYTES,
            image_content_type="image/png",
        )
        await use_case.execute(request)

        with pytest.raises(AlreadyExistsError):
            await use_case.execute(request)
        assert len(uploader.uploads) == 1

    @pytest.mark.asyncio
    async def test_non_image_rejected(self, unit_env):
        use_case = await unit_env.get(CreateMyRestaurantUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateMyRestaurantRequest(
                    user_id=str(uuid4()),
                    form=make_form(),
                    image_data=b"hello",
                    image_content_type="text/plain",
                )
            )


class TestUpdateMyRestaurantUseCase:
    async def _create(self, unit_env, user_id: str):
        use_case = await unit_env.get(CreateMyRestaurantUseCase)
        return await use_case.execute(
            CreateMyRestaurantRequest(
                user_id=user_id,
                form=make_form(),
                image_data=PNG_BYTES,
                image_content_type="image/png",
            )
        )

    @pytest.mark.asyncio
    async def test_overwrites_details_and_keeps_image(self, unit_env):
        # Arrange
        user_id = str(uuid4())
        created = await self._create(unit_env, user_id)
        update = await unit_env.get(UpdateMyRestaurantUseCase)
        kept_item = created.menu_items[0]

        form = make_form(
            restaurantName="Luigi's Trattoria",
            cuisines=["Italian"],
            menuItems=[
                {"_id": kept_item.id, "name": "Margherita", "price": 10.0},
                {"name": "Marinara", "price": 8.0},
            ],
        )

        # Act
        response = await update.execute(
            UpdateMyRestaurantRequest(user_id=user_id, form=form)
        )

        # Assert
        assert response.id == created.id
        assert response.restaurant_name == "Luigi's Trattoria"
        assert response.cuisines == ["Italian"]
        assert [item.name for item in response.menu_items] == ["Margherita", "Marinara"]
        assert response.menu_items[0].id == kept_item.id
        assert response.menu_items[0].price == 10.0
        assert response.image_url == created.image_url
        assert response.last_updated >= created.last_updated

    @pytest.mark.asyncio
    async def test_replaces_image_when_sent(self, unit_env):
        user_id = str(uuid4())
        created = await self._create(unit_env, user_id)
        update = await unit_env.get(UpdateMyRestaurantUseCase)

        response = await update.execute(
            UpdateMyRestaurantRequest(
                user_id=user_id,
                form=make_form(),
                image_data=JPEG_BYTES,
                image_content_type="image/jpeg",
            )
        )

        assert response.image_url != created.image_url

    @pytest.mark.asyncio
    async def test_without_restaurant_raises(self, unit_env):
        update = await unit_env.get(UpdateMyRestaurantUseCase)

        with pytest.raises(NotFoundError):
            await update.execute(
                UpdateMyRestaurantRequest(user_id=str(uuid4()), form=make_form())
            )


class TestGetMyRestaurantUseCase:
    @pytest.mark.asyncio
    async def test_without_restaurant_raises(self, unit_env):
        get = await unit_env.get(GetMyRestaurantUseCase)

        with pytest.raises(NotFoundError):
            await get.execute(GetMyRestaurantRequest(user_id=str(uuid4())))
