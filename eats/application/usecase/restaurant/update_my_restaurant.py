"""Update my restaurant use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from eats.application.usecase.base import BaseUseCase
from eats.application.usecase.restaurant.common import RestaurantForm, RestaurantResponse
from eats.domain.service import MediaService, RestaurantService
from eats.domain.value import UserId


class UpdateMyRestaurantRequest(BaseModel):
    """Update my restaurant request.

    Without image data the current image is kept.
    """

    user_id: str  # From resolved identity
    form: RestaurantForm
    image_data: bytes | None = None
    image_content_type: str | None = None


class UpdateMyRestaurantUseCase(BaseUseCase):
    """Use case for editing the caller's restaurant."""

    def __init__(
        self,
        restaurant_service: RestaurantService,
        media_service: MediaService,
    ) -> None:
        """Initialize update my restaurant use case.

        Args:
            restaurant_service: Restaurant domain service
            media_service: Image upload service
        """
        self.restaurant_service = restaurant_service
        self.media_service = media_service

    async def execute(self, request: UpdateMyRestaurantRequest) -> RestaurantResponse:
        """Overwrite the restaurant's details and menu.

        Raises:
            NotFoundError: If the caller has no restaurant
            ValidationError: If a new image is rejected
            MediaUploadError: If the image host fails
        """
        restaurant = await self.restaurant_service.get_for_user(
            UserId(UUID(request.user_id))
        )

        with logfire.span(
            "update_my_restaurant.execute", restaurant_id=str(restaurant.id)
        ):
            image_url = restaurant.image_url
            if request.image_data is not None:
                image_url = await self.media_service.upload_image(
                    request.image_data, request.image_content_type
                )

            form = request.form
            updated = restaurant.model_copy(
                update={
                    "restaurant_name": form.restaurant_name,
                    "city": form.city,
                    "country": form.country,
                    "delivery_price": form.delivery_price,
                    "estimated_delivery_time": form.estimated_delivery_time,
                    "cuisines": form.cuisines,
                    "menu_items": [item.to_menu_item() for item in form.menu_items],
                    "image_url": image_url,
                    "last_updated": datetime.now(),
                }
            )

            saved = await self.restaurant_service.save(updated)
            return RestaurantResponse.from_restaurant(saved)
