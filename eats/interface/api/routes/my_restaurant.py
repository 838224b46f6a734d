"""Restaurant owner routes.

A user owns at most one restaurant. Create and update take a multipart
body (see eats.interface.api.forms) so the cover image can travel with
the restaurant details.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
import logfire

from eats.application.usecase.order import (
    GetMyRestaurantOrdersUseCase,
    UpdateOrderStatusUseCase,
)
from eats.application.usecase.order.common import OrderResponse
from eats.application.usecase.order.get_my_restaurant_orders import (
    GetMyRestaurantOrdersRequest,
)
from eats.application.usecase.order.update_order_status import (
    UpdateOrderStatusForm,
    UpdateOrderStatusRequest,
)
from eats.application.usecase.restaurant import (
    CreateMyRestaurantUseCase,
    GetMyRestaurantUseCase,
    UpdateMyRestaurantUseCase,
)
from eats.application.usecase.restaurant.common import RestaurantResponse
from eats.application.usecase.restaurant.create_my_restaurant import (
    CreateMyRestaurantRequest,
)
from eats.application.usecase.restaurant.get_my_restaurant import (
    GetMyRestaurantRequest,
)
from eats.application.usecase.restaurant.update_my_restaurant import (
    UpdateMyRestaurantRequest,
)
from eats.domain.error import (
    AlreadyExistsError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from eats.interface.api.deps import CurrentIdentity
from eats.interface.api.forms import parse_restaurant_form, read_image

router = APIRouter(
    prefix="/api/my/restaurant", tags=["my-restaurant"], route_class=DishkaRoute
)


@router.get("", response_model=RestaurantResponse)
async def get_my_restaurant(
    identity: CurrentIdentity,
    get_my_restaurant_use_case: FromDishka[GetMyRestaurantUseCase],
) -> RestaurantResponse:
    """Get the caller's restaurant."""
    try:
        return await get_my_restaurant_use_case.execute(
            GetMyRestaurantRequest(user_id=str(identity.user_id))
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="restaurant not found"
        )
    except Exception:
        logfire.exception("Unexpected error fetching restaurant")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching restaurant",
        )


@router.post(
    "", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED
)
async def create_my_restaurant(
    request: Request,
    identity: CurrentIdentity,
    create_my_restaurant_use_case: FromDishka[CreateMyRestaurantUseCase],
) -> RestaurantResponse:
    """Open the caller's restaurant.

    Requires an `imageFile` part with the cover image.
    """
    form_data = await request.form()
    form = parse_restaurant_form(form_data)
    image = await read_image(form_data)
    if image is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Image file is required"
        )

    try:
        return await create_my_restaurant_use_case.execute(
            CreateMyRestaurantRequest(
                user_id=str(identity.user_id),
                form=form,
                image_data=image.data,
                image_content_type=image.content_type,
            )
        )
    except AlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User restaurant already exists",
        )
    except ValidationError as e:
        logfire.warn("Restaurant image rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logfire.exception("Unexpected error creating restaurant")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong",
        )


@router.put("", response_model=RestaurantResponse)
async def update_my_restaurant(
    request: Request,
    identity: CurrentIdentity,
    update_my_restaurant_use_case: FromDishka[UpdateMyRestaurantUseCase],
) -> RestaurantResponse:
    """Replace the caller's restaurant details and menu.

    The cover image is only replaced when an `imageFile` part is sent.
    """
    form_data = await request.form()
    form = parse_restaurant_form(form_data)
    image = await read_image(form_data)

    try:
        return await update_my_restaurant_use_case.execute(
            UpdateMyRestaurantRequest(
                user_id=str(identity.user_id),
                form=form,
                image_data=image.data if image else None,
                image_content_type=image.content_type if image else None,
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="restaurant not found"
        )
    except ValidationError as e:
        logfire.warn("Restaurant image rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logfire.exception("Unexpected error updating restaurant")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong",
        )


@router.get("/order", response_model=list[OrderResponse])
async def get_my_restaurant_orders(
    identity: CurrentIdentity,
    get_my_restaurant_orders_use_case: FromDishka[GetMyRestaurantOrdersUseCase],
) -> list[OrderResponse]:
    """List the orders placed with the caller's restaurant, newest first."""
    try:
        result = await get_my_restaurant_orders_use_case.execute(
            GetMyRestaurantOrdersRequest(user_id=str(identity.user_id))
        )
        return result.orders
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="restaurant not found"
        )
    except Exception:
        logfire.exception("Unexpected error fetching orders")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong",
        )


@router.patch("/order/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: UUID,
    request: UpdateOrderStatusForm,
    identity: CurrentIdentity,
    update_order_status_use_case: FromDishka[UpdateOrderStatusUseCase],
) -> OrderResponse | Response:
    """Move an order of the caller's restaurant to a new status.

    Example:
        PATCH /api/my/restaurant/order/<order id>/status
        {"status": "outForDelivery"}
    """
    try:
        return await update_order_status_use_case.execute(
            UpdateOrderStatusRequest(
                user_id=str(identity.user_id),
                order_id=str(order_id),
                status=request.status,
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="order not found"
        )
    except NotAuthorizedError as e:
        logfire.warn("Order status update by non-owner", error=str(e))
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)
    except Exception:
        logfire.exception("Unexpected error updating order status")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong",
        )
