"""Order use cases."""

from .get_my_restaurant_orders import GetMyRestaurantOrdersUseCase
from .update_order_status import UpdateOrderStatusUseCase

__all__ = ["GetMyRestaurantOrdersUseCase", "UpdateOrderStatusUseCase"]
