"""In-memory restaurant repository for testing."""

from typing import Optional

from eats.domain.error import AlreadyExistsError
from eats.domain.model.restaurant import Restaurant
from eats.domain.repository.restaurant import RestaurantRepository
from eats.domain.value import RestaurantId, UserId


class InMemoryRestaurantRepository(RestaurantRepository):
    """In-memory implementation of RestaurantRepository for testing."""

    def __init__(self) -> None:
        self._restaurants: dict[RestaurantId, Restaurant] = {}

    async def find_by_id(self, restaurant_id: RestaurantId) -> Optional[Restaurant]:
        return self._restaurants.get(restaurant_id)

    async def find_by_user_id(self, user_id: UserId) -> Optional[Restaurant]:
        for restaurant in self._restaurants.values():
            if restaurant.user_id == user_id:
                return restaurant
        return None

    async def add(self, restaurant: Restaurant) -> Restaurant:
        if await self.find_by_user_id(restaurant.user_id):
            raise AlreadyExistsError("Restaurant", str(restaurant.user_id))
        self._restaurants[restaurant.id] = restaurant
        return restaurant

    async def save(self, restaurant: Restaurant) -> Restaurant:
        self._restaurants[restaurant.id] = restaurant
        return restaurant
