"""Restaurant aggregate.

Each user owns at most one restaurant, edited through the
"my restaurant" endpoints.
"""

from datetime import datetime
from uuid import uuid4

from pydantic import Field

from eats.domain.model.common import DomainModel
from eats.domain.value import MenuItemId, RestaurantId, UserId


class MenuItem(DomainModel):
    """Dish on a restaurant menu."""

    id: MenuItemId = Field(default_factory=lambda: MenuItemId(uuid4()))
    name: str
    price: float = Field(ge=0)


class Restaurant(DomainModel):
    """Restaurant owned by a user."""

    id: RestaurantId
    user_id: UserId
    restaurant_name: str
    city: str
    country: str
    delivery_price: float = Field(ge=0)
    estimated_delivery_time: int = Field(ge=0)  # minutes
    cuisines: list[str] = Field(default_factory=list)
    menu_items: list[MenuItem] = Field(default_factory=list)
    image_url: str
    last_updated: datetime = Field(default_factory=datetime.now)
