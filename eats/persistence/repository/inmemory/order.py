"""In-memory order repository for testing."""

from typing import Optional

from eats.domain.model.order import Order
from eats.domain.repository.order import OrderRepository
from eats.domain.value import OrderId, RestaurantId


class InMemoryOrderRepository(OrderRepository):
    """In-memory implementation of OrderRepository for testing."""

    def __init__(self) -> None:
        self._orders: dict[OrderId, Order] = {}

    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        return self._orders.get(order_id)

    async def find_by_restaurant_id(self, restaurant_id: RestaurantId) -> list[Order]:
        matches = [o for o in self._orders.values() if o.restaurant_id == restaurant_id]
        matches.sort(key=lambda o: o.created_at, reverse=True)
        return matches

    async def save(self, order: Order) -> Order:
        self._orders[order.id] = order
        return order
