"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through the SQLAlchemy ORM.
"""

from typing import Any, Dict
from uuid import UUID

from eats.domain.model import CartItem, DeliveryDetails, MenuItem, Order, Restaurant, User
from eats.domain.value import MenuItemId, OrderId, OrderStatus, RestaurantId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        auth0_id=row["auth0_id"],
        email=row["email"],
        name=row.get("name"),
        address_line1=row.get("address_line1"),
        city=row.get("city"),
        country=row.get("country"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_restaurant(row: Dict[str, Any]) -> Restaurant:
    """Convert database row to Restaurant domain model.

    Menu items are stored as a JSON array on the restaurant row.
    """
    return Restaurant(
        id=RestaurantId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        restaurant_name=row["restaurant_name"],
        city=row["city"],
        country=row["country"],
        delivery_price=row["delivery_price"],
        estimated_delivery_time=row["estimated_delivery_time"],
        cuisines=list(row.get("cuisines") or []),
        menu_items=[
            MenuItem(
                id=MenuItemId(_uuid(item["id"])),
                name=item["name"],
                price=item["price"],
            )
            for item in row.get("menu_items") or []
        ],
        image_url=row["image_url"],
        last_updated=row["last_updated"],
    )


def restaurant_to_dict(restaurant: Restaurant) -> Dict[str, Any]:
    """Convert Restaurant domain model to database dict."""
    data = restaurant.model_dump(exclude={"menu_items"})
    data["menu_items"] = [item.model_dump(mode="json") for item in restaurant.menu_items]
    return data


def row_to_order(row: Dict[str, Any]) -> Order:
    """Convert database row to Order domain model."""
    return Order(
        id=OrderId(_uuid(row["id"])),
        restaurant_id=RestaurantId(_uuid(row["restaurant_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        delivery_details=DeliveryDetails(**row["delivery_details"]),
        cart_items=[CartItem(**item) for item in row["cart_items"]],
        total_amount=row.get("total_amount"),
        status=OrderStatus(row["status"]),
        created_at=row["created_at"],
    )


def order_to_dict(order: Order) -> Dict[str, Any]:
    """Convert Order domain model to database dict."""
    data = order.model_dump(exclude={"delivery_details", "cart_items", "status"})
    data["delivery_details"] = order.delivery_details.model_dump(mode="json")
    data["cart_items"] = [item.model_dump(mode="json") for item in order.cart_items]
    data["status"] = order.status.value
    return data
