"""Create my restaurant use case."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from eats.application.usecase.base import BaseUseCase
from eats.application.usecase.restaurant.common import RestaurantForm, RestaurantResponse
from eats.domain.error import AlreadyExistsError
from eats.domain.model import Restaurant
from eats.domain.service import MediaService, RestaurantService
from eats.domain.value import RestaurantId, UserId


class CreateMyRestaurantRequest(BaseModel):
    """Create my restaurant request."""

    user_id: str  # From resolved identity
    form: RestaurantForm
    image_data: bytes
    image_content_type: str | None = None


class CreateMyRestaurantUseCase(BaseUseCase):
    """Use case for opening the caller's restaurant."""

    def __init__(
        self,
        restaurant_service: RestaurantService,
        media_service: MediaService,
    ) -> None:
        """Initialize create my restaurant use case.

        Args:
            restaurant_service: Restaurant domain service
            media_service: Image upload service
        """
        self.restaurant_service = restaurant_service
        self.media_service = media_service

    async def execute(self, request: CreateMyRestaurantRequest) -> RestaurantResponse:
        """Execute create restaurant flow.

        Steps:
        1. Reject if the caller already owns a restaurant
        2. Upload the cover image
        3. Save the restaurant

        Raises:
            AlreadyExistsError: If the caller already owns a restaurant
            ValidationError: If the image is rejected
            MediaUploadError: If the image host fails
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span("create_my_restaurant.execute", user_id=request.user_id):
            # Checked before the upload so no orphan image is hosted
            if await self.restaurant_service.find_for_user(user_id):
                raise AlreadyExistsError("Restaurant", request.user_id)

            image_url = await self.media_service.upload_image(
                request.image_data, request.image_content_type
            )

            form = request.form
            restaurant = Restaurant(
                id=RestaurantId(uuid4()),
                user_id=user_id,
                restaurant_name=form.restaurant_name,
                city=form.city,
                country=form.country,
                delivery_price=form.delivery_price,
                estimated_delivery_time=form.estimated_delivery_time,
                cuisines=form.cuisines,
                menu_items=[item.to_menu_item() for item in form.menu_items],
                image_url=image_url,
                last_updated=datetime.now(),
            )

            saved = await self.restaurant_service.create(restaurant)
            return RestaurantResponse.from_restaurant(saved)
