"""Order domain service."""

import logfire

from eats.domain.error import NotAuthorizedError, NotFoundError
from eats.domain.model import Order, Restaurant
from eats.domain.repository import OrderRepository
from eats.domain.value import OrderId, OrderStatus, RestaurantId, UserId

from .base import Service


class OrderService(Service):
    """Domain service for order operations."""

    def __init__(self, order_repository: OrderRepository) -> None:
        """Initialize order service.

        Args:
            order_repository: Order repository
        """
        self.order_repository = order_repository

    async def list_for_restaurant(self, restaurant_id: RestaurantId) -> list[Order]:
        """List a restaurant's orders, newest first."""
        with logfire.span(
            "order_service.list_for_restaurant", restaurant_id=str(restaurant_id)
        ):
            orders = await self.order_repository.find_by_restaurant_id(restaurant_id)
            logfire.info(
                "Orders listed", restaurant_id=str(restaurant_id), count=len(orders)
            )
            return orders

    async def get_by_id(self, order_id: OrderId) -> Order:
        """Get order by ID.

        Raises:
            NotFoundError: If order not found
        """
        order = await self.order_repository.find_by_id(order_id)
        if not order:
            logfire.warn("Order not found", order_id=str(order_id))
            raise NotFoundError("Order", str(order_id))
        return order

    async def update_status(
        self,
        order: Order,
        restaurant: Restaurant,
        user_id: UserId,
        status: OrderStatus,
    ) -> Order:
        """Move an order to a new status on behalf of the restaurant owner.

        Args:
            order: Order to update
            restaurant: Restaurant the order was placed with
            user_id: Caller
            status: New status

        Returns:
            Updated order

        Raises:
            NotAuthorizedError: If the caller does not own the restaurant
        """
        if order.restaurant_id != restaurant.id or restaurant.user_id != user_id:
            logfire.warn(
                "Order status update rejected",
                order_id=str(order.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("order", str(order.id), str(user_id))

        with logfire.span(
            "order_service.update_status", order_id=str(order.id), status=status.value
        ):
            saved = await self.order_repository.save(
                order.model_copy(update={"status": status})
            )
            logfire.info("Order status updated", order_id=str(saved.id), status=status.value)
            return saved
