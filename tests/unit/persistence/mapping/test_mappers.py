"""Unit tests for row/model mappers."""

from uuid import uuid4

from eats.domain.value import OrderStatus, UserId
from eats.persistence.mappers import (
    order_to_dict,
    restaurant_to_dict,
    row_to_order,
    row_to_restaurant,
    row_to_user,
    user_to_dict,
)
from tests.factories import make_order, make_restaurant, make_user


class TestUserMapping:
    def test_dict_matches_table_columns(self):
        user = make_user()

        data = user_to_dict(user)

        assert set(data) == {
            "id",
            "auth0_id",
            "email",
            "name",
            "address_line1",
            "city",
            "country",
        }
        assert row_to_user(data) == user


class TestRestaurantMapping:
    def test_menu_items_stored_as_json(self):
        restaurant = make_restaurant(UserId(uuid4()))

        data = restaurant_to_dict(restaurant)

        item = data["menu_items"][0]
        assert item == {
            "id": str(restaurant.menu_items[0].id),
            "name": "Margherita",
            "price": 9.5,
        }
        assert row_to_restaurant(data) == restaurant


class TestOrderMapping:
    def test_status_stored_as_string(self):
        order = make_order(make_restaurant(UserId(uuid4())).id)

        data = order_to_dict(order)

        assert data["status"] == "placed"
        assert data["delivery_details"]["address_line1"] == "2 High St"
        restored = row_to_order(data)
        assert restored == order
        assert restored.status is OrderStatus.PLACED
