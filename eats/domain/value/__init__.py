"""Domain value objects."""

from eats.domain.value.identifiers import MenuItemId, OrderId, RestaurantId, UserId
from eats.domain.value.types import OrderStatus, ResolvedIdentity, UserProfile

__all__ = [
    # Identifiers
    "UserId",
    "RestaurantId",
    "MenuItemId",
    "OrderId",
    # Types
    "OrderStatus",
    "ResolvedIdentity",
    "UserProfile",
]
