"""Domain layer DI providers."""

from dishka import Scope, provide

from eats.config import MediaSettings
from eats.domain.repository import (
    OrderRepository,
    RestaurantRepository,
    UserRepository,
)
from eats.domain.service import (
    AuthService,
    ImageUploader,
    MediaService,
    OrderService,
    RestaurantService,
    TokenVerifier,
    UserService,
)
from eats.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, token_verifier: TokenVerifier, user_repository: UserRepository
    ) -> AuthService:
        """Provide request authentication domain service."""
        return AuthService(
            token_verifier=token_verifier, user_repository=user_repository
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_restaurant_service(
        self, restaurant_repository: RestaurantRepository
    ) -> RestaurantService:
        """Provide restaurant domain service."""
        return RestaurantService(restaurant_repository=restaurant_repository)

    @provide
    def get_order_service(self, order_repository: OrderRepository) -> OrderService:
        """Provide order domain service."""
        return OrderService(order_repository=order_repository)

    @provide
    def get_media_service(
        self, image_uploader: ImageUploader, media_settings: MediaSettings
    ) -> MediaService:
        """Provide image upload domain service."""
        return MediaService(
            image_uploader=image_uploader,
            max_image_bytes=media_settings.max_image_bytes,
        )
