"""Shared order response models."""

from datetime import datetime

from pydantic import Field

from eats.application.usecase.base import ApiModel
from eats.domain.model import Order
from eats.domain.value import OrderStatus


class DeliveryDetailsResponse(ApiModel):
    email: str
    name: str
    address_line1: str
    city: str


class CartItemResponse(ApiModel):
    menu_item_id: str
    name: str
    quantity: int


class OrderResponse(ApiModel):
    """Order as shown to the restaurant owner."""

    id: str = Field(alias="_id")
    restaurant: str
    user: str
    delivery_details: DeliveryDetailsResponse
    cart_items: list[CartItemResponse]
    total_amount: float | None = None
    status: OrderStatus
    created_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(
            id=str(order.id),
            restaurant=str(order.restaurant_id),
            user=str(order.user_id),
            delivery_details=DeliveryDetailsResponse(
                **order.delivery_details.model_dump()
            ),
            cart_items=[
                CartItemResponse(**item.model_dump()) for item in order.cart_items
            ],
            total_amount=order.total_amount,
            status=order.status,
            created_at=order.created_at,
        )
