"""Get my restaurant orders use case."""

from uuid import UUID

from pydantic import BaseModel

from eats.application.usecase.base import BaseUseCase
from eats.application.usecase.order.common import OrderResponse
from eats.domain.service import OrderService, RestaurantService
from eats.domain.value import UserId


class GetMyRestaurantOrdersRequest(BaseModel):
    """Get my restaurant orders request."""

    user_id: str  # From resolved identity


class GetMyRestaurantOrdersResponse(BaseModel):
    """Get my restaurant orders response."""

    orders: list[OrderResponse]


class GetMyRestaurantOrdersUseCase(BaseUseCase):
    """Use case for listing the orders placed with the caller's restaurant."""

    def __init__(
        self,
        restaurant_service: RestaurantService,
        order_service: OrderService,
    ) -> None:
        """Initialize get my restaurant orders use case.

        Args:
            restaurant_service: Restaurant domain service
            order_service: Order domain service
        """
        self.restaurant_service = restaurant_service
        self.order_service = order_service

    async def execute(
        self, request: GetMyRestaurantOrdersRequest
    ) -> GetMyRestaurantOrdersResponse:
        """List orders, newest first.

        Raises:
            NotFoundError: If the caller has no restaurant
        """
        restaurant = await self.restaurant_service.get_for_user(
            UserId(UUID(request.user_id))
        )
        orders = await self.order_service.list_for_restaurant(restaurant.id)
        return GetMyRestaurantOrdersResponse(
            orders=[OrderResponse.from_order(order) for order in orders]
        )
