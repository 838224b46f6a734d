"""Order repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from eats.domain.model.order import Order
from eats.domain.value import OrderId, RestaurantId


class OrderRepository(ABC):
    """Repository for Order entity."""

    @abstractmethod
    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Find an order by ID.

        Args:
            order_id: The order's identifier

        Returns:
            The order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_restaurant_id(self, restaurant_id: RestaurantId) -> list[Order]:
        """List orders placed with a restaurant, newest first.

        Args:
            restaurant_id: The restaurant's identifier

        Returns:
            List of orders (may be empty)
        """
        pass

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """Save an order (create or update)."""
        pass
