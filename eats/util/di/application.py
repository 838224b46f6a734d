"""Application layer DI providers."""

from dishka import Scope, provide

from eats.application.usecase.order import (
    GetMyRestaurantOrdersUseCase,
    UpdateOrderStatusUseCase,
)
from eats.application.usecase.restaurant import (
    CreateMyRestaurantUseCase,
    GetMyRestaurantUseCase,
    UpdateMyRestaurantUseCase,
)
from eats.application.usecase.user import (
    CreateCurrentUserUseCase,
    GetCurrentUserUseCase,
    UpdateCurrentUserUseCase,
)
from eats.domain.service import (
    MediaService,
    OrderService,
    RestaurantService,
    UserService,
)
from eats.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_create_current_user_use_case(
        self, user_service: UserService
    ) -> CreateCurrentUserUseCase:
        """Provide create current user use case."""
        return CreateCurrentUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_current_user_use_case(
        self, user_service: UserService
    ) -> UpdateCurrentUserUseCase:
        """Provide update current user use case."""
        return UpdateCurrentUserUseCase(user_service=user_service)

    # Restaurant use cases
    @provide(scope=Scope.REQUEST)
    def get_get_my_restaurant_use_case(
        self, restaurant_service: RestaurantService
    ) -> GetMyRestaurantUseCase:
        """Provide get my restaurant use case."""
        return GetMyRestaurantUseCase(restaurant_service=restaurant_service)

    @provide(scope=Scope.REQUEST)
    def get_create_my_restaurant_use_case(
        self, restaurant_service: RestaurantService, media_service: MediaService
    ) -> CreateMyRestaurantUseCase:
        """Provide create my restaurant use case."""
        return CreateMyRestaurantUseCase(
            restaurant_service=restaurant_service, media_service=media_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_my_restaurant_use_case(
        self, restaurant_service: RestaurantService, media_service: MediaService
    ) -> UpdateMyRestaurantUseCase:
        """Provide update my restaurant use case."""
        return UpdateMyRestaurantUseCase(
            restaurant_service=restaurant_service, media_service=media_service
        )

    # Order use cases
    @provide(scope=Scope.REQUEST)
    def get_get_my_restaurant_orders_use_case(
        self, restaurant_service: RestaurantService, order_service: OrderService
    ) -> GetMyRestaurantOrdersUseCase:
        """Provide get my restaurant orders use case."""
        return GetMyRestaurantOrdersUseCase(
            restaurant_service=restaurant_service, order_service=order_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_order_status_use_case(
        self, restaurant_service: RestaurantService, order_service: OrderService
    ) -> UpdateOrderStatusUseCase:
        """Provide update order status use case."""
        return UpdateOrderStatusUseCase(
            restaurant_service=restaurant_service, order_service=order_service
        )
