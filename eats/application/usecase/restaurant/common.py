"""Shared restaurant request and response models."""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import Field, field_validator

from eats.application.usecase.base import ApiModel
from eats.domain.model import MenuItem, Restaurant
from eats.domain.value import MenuItemId


class MenuItemForm(ApiModel):
    """Menu item as submitted by the owner.

    Existing items keep their id; new ones get one assigned.
    """

    id: UUID | None = Field(default=None, alias="_id")
    name: str = Field(min_length=1)
    price: float = Field(ge=0)

    @field_validator("id", mode="before")
    @classmethod
    def blank_id_is_new(cls, value):
        return value or None

    def to_menu_item(self) -> MenuItem:
        return MenuItem(
            id=MenuItemId(self.id or uuid4()),
            name=self.name,
            price=self.price,
        )


class RestaurantForm(ApiModel):
    """Editable restaurant fields (multipart body of the restaurant endpoints)."""

    restaurant_name: str = Field(min_length=1)
    city: str = Field(min_length=1)
    country: str = Field(min_length=1)
    delivery_price: float = Field(ge=0)
    estimated_delivery_time: int = Field(ge=0)
    cuisines: list[str] = Field(min_length=1)
    menu_items: list[MenuItemForm] = Field(min_length=1)

    @field_validator("cuisines", mode="before")
    @classmethod
    def single_cuisine(cls, value):
        return [value] if isinstance(value, str) else value


class MenuItemResponse(ApiModel):
    id: str = Field(alias="_id")
    name: str
    price: float


class RestaurantResponse(ApiModel):
    """Restaurant as returned to its owner."""

    id: str = Field(alias="_id")
    user: str  # Owner account id
    restaurant_name: str
    city: str
    country: str
    delivery_price: float
    estimated_delivery_time: int
    cuisines: list[str]
    menu_items: list[MenuItemResponse]
    image_url: str
    last_updated: datetime

    @classmethod
    def from_restaurant(cls, restaurant: Restaurant) -> "RestaurantResponse":
        return cls(
            id=str(restaurant.id),
            user=str(restaurant.user_id),
            restaurant_name=restaurant.restaurant_name,
            city=restaurant.city,
            country=restaurant.country,
            delivery_price=restaurant.delivery_price,
            estimated_delivery_time=restaurant.estimated_delivery_time,
            cuisines=list(restaurant.cuisines),
            menu_items=[
                MenuItemResponse(id=str(item.id), name=item.name, price=item.price)
                for item in restaurant.menu_items
            ],
            image_url=restaurant.image_url,
            last_updated=restaurant.last_updated,
        )
