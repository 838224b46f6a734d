"""In-memory repository implementations for testing."""

from .order import InMemoryOrderRepository
from .restaurant import InMemoryRestaurantRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryOrderRepository",
    "InMemoryRestaurantRepository",
    "InMemoryUserRepository",
]
