"""Builders for domain objects used across tests."""

from datetime import datetime
from uuid import uuid4

from eats.domain.model import (
    CartItem,
    DeliveryDetails,
    MenuItem,
    Order,
    Restaurant,
    User,
)
from eats.domain.value import OrderId, RestaurantId, UserId


def make_user(auth0_id: str = "auth0|abc", email: str = "a@x.io") -> User:
    return User(id=UserId(uuid4()), auth0_id=auth0_id, email=email)


def make_restaurant(user_id: UserId, name: str = "Luigi's") -> Restaurant:
    return Restaurant(
        id=RestaurantId(uuid4()),
        user_id=user_id,
        restaurant_name=name,
        city="London",
        country="UK",
        delivery_price=2.5,
        estimated_delivery_time=30,
        cuisines=["Pizza"],
        menu_items=[MenuItem(name="Margherita", price=9.5)],
        image_url="http://res.cloudinary.com/mock/image/upload/x.png",
    )


def make_order(
    restaurant_id: RestaurantId, created_at: datetime | None = None
) -> Order:
    return Order(
        id=OrderId(uuid4()),
        restaurant_id=restaurant_id,
        user_id=UserId(uuid4()),
        delivery_details=DeliveryDetails(
            email="c@x.io", name="Cleo", address_line1="2 High St", city="London"
        ),
        cart_items=[CartItem(menu_item_id=str(uuid4()), name="Margherita", quantity=2)],
        total_amount=21.5,
        created_at=created_at or datetime.now(),
    )
