"""Get my restaurant use case."""

from uuid import UUID

from pydantic import BaseModel

from eats.application.usecase.base import BaseUseCase
from eats.application.usecase.restaurant.common import RestaurantResponse
from eats.domain.service import RestaurantService
from eats.domain.value import UserId


class GetMyRestaurantRequest(BaseModel):
    """Get my restaurant request."""

    user_id: str  # From resolved identity


class GetMyRestaurantUseCase(BaseUseCase):
    """Use case for loading the restaurant owned by the caller."""

    def __init__(self, restaurant_service: RestaurantService) -> None:
        """Initialize get my restaurant use case.

        Args:
            restaurant_service: Restaurant domain service
        """
        self.restaurant_service = restaurant_service

    async def execute(self, request: GetMyRestaurantRequest) -> RestaurantResponse:
        """Raises NotFoundError if the caller has no restaurant."""
        restaurant = await self.restaurant_service.get_for_user(
            UserId(UUID(request.user_id))
        )
        return RestaurantResponse.from_restaurant(restaurant)
