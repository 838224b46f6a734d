"""Restaurant use cases."""

from .create_my_restaurant import CreateMyRestaurantUseCase
from .get_my_restaurant import GetMyRestaurantUseCase
from .update_my_restaurant import UpdateMyRestaurantUseCase

__all__ = [
    "CreateMyRestaurantUseCase",
    "GetMyRestaurantUseCase",
    "UpdateMyRestaurantUseCase",
]
