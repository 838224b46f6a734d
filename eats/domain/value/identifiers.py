"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
RestaurantId = NewType("RestaurantId", UUID)
MenuItemId = NewType("MenuItemId", UUID)
OrderId = NewType("OrderId", UUID)
