"""Update order status use case."""

from uuid import UUID

from pydantic import BaseModel

from eats.application.usecase.base import ApiModel, BaseUseCase
from eats.application.usecase.order.common import OrderResponse
from eats.domain.service import OrderService, RestaurantService
from eats.domain.value import OrderId, UserId
from eats.domain.value.types import OrderStatus


class UpdateOrderStatusForm(ApiModel):
    """JSON body of PATCH /api/my/restaurant/order/{orderId}/status."""

    status: OrderStatus


class UpdateOrderStatusRequest(BaseModel):
    """Update order status request."""

    user_id: str  # From resolved identity
    order_id: str
    status: OrderStatus


class UpdateOrderStatusUseCase(BaseUseCase):
    """Use case for a restaurant owner moving an order along."""

    def __init__(
        self,
        restaurant_service: RestaurantService,
        order_service: OrderService,
    ) -> None:
        """Initialize update order status use case.

        Args:
            restaurant_service: Restaurant domain service
            order_service: Order domain service
        """
        self.restaurant_service = restaurant_service
        self.order_service = order_service

    async def execute(self, request: UpdateOrderStatusRequest) -> OrderResponse:
        """Execute update order status flow.

        Steps:
        1. Load the order
        2. Load the restaurant it was placed with
        3. Check the caller owns that restaurant and save the new status

        Raises:
            NotFoundError: If the order does not exist
            NotAuthorizedError: If the caller does not own the restaurant
        """
        order = await self.order_service.get_by_id(OrderId(UUID(request.order_id)))
        restaurant = await self.restaurant_service.get_by_id(order.restaurant_id)

        updated = await self.order_service.update_status(
            order,
            restaurant,
            UserId(UUID(request.user_id)),
            request.status,
        )
        return OrderResponse.from_order(updated)
