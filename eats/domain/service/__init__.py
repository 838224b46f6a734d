"""Domain services."""

from .auth_service import AuthService, TokenVerifier
from .base import Service
from .media_service import ImageUploader, MediaService
from .order_service import OrderService
from .restaurant_service import RestaurantService
from .user_service import ProvisionResult, UserService

__all__ = [
    "AuthService",
    "ImageUploader",
    "MediaService",
    "OrderService",
    "ProvisionResult",
    "RestaurantService",
    "Service",
    "TokenVerifier",
    "UserService",
]
