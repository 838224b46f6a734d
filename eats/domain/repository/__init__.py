"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from eats.domain.repository.order import OrderRepository
from eats.domain.repository.restaurant import RestaurantRepository
from eats.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "RestaurantRepository",
    "OrderRepository",
]
