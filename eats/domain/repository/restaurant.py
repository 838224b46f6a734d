"""Restaurant repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from eats.domain.model.restaurant import Restaurant
from eats.domain.value import RestaurantId, UserId


class RestaurantRepository(ABC):
    """Repository for Restaurant aggregate."""

    @abstractmethod
    async def find_by_id(self, restaurant_id: RestaurantId) -> Optional[Restaurant]:
        """Find a restaurant by ID.

        Args:
            restaurant_id: The restaurant's identifier

        Returns:
            The restaurant if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[Restaurant]:
        """Find the restaurant owned by a user.

        Args:
            user_id: Owner's internal identifier

        Returns:
            The restaurant if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, restaurant: Restaurant) -> Restaurant:
        """Insert a new restaurant.

        Raises:
            AlreadyExistsError: If the owner already has a restaurant
        """
        pass

    @abstractmethod
    async def save(self, restaurant: Restaurant) -> Restaurant:
        """Persist changes to an existing restaurant."""
        pass
