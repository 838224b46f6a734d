"""Order entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from eats.domain.model.common import DomainModel
from eats.domain.value import OrderId, OrderStatus, RestaurantId, UserId


class DeliveryDetails(DomainModel):
    """Where and to whom an order is delivered."""

    email: str
    name: str
    address_line1: str
    city: str


class CartItem(DomainModel):
    """Line of an order."""

    menu_item_id: str
    name: str
    quantity: int = Field(ge=1)


class Order(DomainModel):
    """Order placed with a restaurant."""

    id: OrderId
    restaurant_id: RestaurantId
    user_id: UserId
    delivery_details: DeliveryDetails
    cart_items: list[CartItem]
    total_amount: Optional[float] = None
    status: OrderStatus = OrderStatus.PLACED
    created_at: datetime = Field(default_factory=datetime.now)
