"""PostgreSQL repository implementations."""

from eats.persistence.repository.order import PostgresOrderRepository
from eats.persistence.repository.restaurant import PostgresRestaurantRepository
from eats.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresRestaurantRepository",
    "PostgresOrderRepository",
]
