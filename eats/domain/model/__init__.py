"""Domain model entities."""

from eats.domain.model.order import CartItem, DeliveryDetails, Order
from eats.domain.model.restaurant import MenuItem, Restaurant
from eats.domain.model.user import User

__all__ = [
    "User",
    "Restaurant",
    "MenuItem",
    "Order",
    "CartItem",
    "DeliveryDetails",
]
