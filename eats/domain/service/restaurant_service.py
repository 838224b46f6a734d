"""Restaurant domain service."""

import logfire

from eats.domain.error import AlreadyExistsError, NotFoundError
from eats.domain.model import Restaurant
from eats.domain.repository import RestaurantRepository
from eats.domain.value import RestaurantId, UserId

from .base import Service


class RestaurantService(Service):
    """Domain service for restaurant operations."""

    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        """Initialize restaurant service.

        Args:
            restaurant_repository: Restaurant repository
        """
        self.restaurant_repository = restaurant_repository

    async def find_for_user(self, user_id: UserId) -> Restaurant | None:
        """Get the restaurant owned by a user, if any."""
        return await self.restaurant_repository.find_by_user_id(user_id)

    async def get_for_user(self, user_id: UserId) -> Restaurant:
        """Get the restaurant owned by a user.

        Raises:
            NotFoundError: If the user has no restaurant
        """
        with logfire.span("restaurant_service.get_for_user", user_id=str(user_id)):
            restaurant = await self.restaurant_repository.find_by_user_id(user_id)
            if not restaurant:
                logfire.warn("Restaurant not found", user_id=str(user_id))
                raise NotFoundError("Restaurant", str(user_id))
            return restaurant

    async def get_by_id(self, restaurant_id: RestaurantId) -> Restaurant:
        """Get restaurant by ID.

        Raises:
            NotFoundError: If restaurant not found
        """
        restaurant = await self.restaurant_repository.find_by_id(restaurant_id)
        if not restaurant:
            raise NotFoundError("Restaurant", str(restaurant_id))
        return restaurant

    async def create(self, restaurant: Restaurant) -> Restaurant:
        """Create a restaurant for its owner.

        Args:
            restaurant: New restaurant

        Returns:
            Saved restaurant

        Raises:
            AlreadyExistsError: If the owner already has a restaurant
        """
        with logfire.span(
            "restaurant_service.create", user_id=str(restaurant.user_id)
        ):
            if await self.restaurant_repository.find_by_user_id(restaurant.user_id):
                raise AlreadyExistsError("Restaurant", str(restaurant.user_id))
            saved = await self.restaurant_repository.add(restaurant)
            logfire.info(
                "Restaurant created",
                restaurant_id=str(saved.id),
                user_id=str(saved.user_id),
            )
            return saved

    async def save(self, restaurant: Restaurant) -> Restaurant:
        """Persist an updated restaurant."""
        with logfire.span("restaurant_service.save", restaurant_id=str(restaurant.id)):
            return await self.restaurant_repository.save(restaurant)
