"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from eats.domain.value.common import ValueObject
from eats.domain.value.identifiers import UserId


class OrderStatus(str, Enum):
    """Lifecycle of an order as seen by the restaurant."""

    PLACED = "placed"
    PAID = "paid"
    IN_PROGRESS = "inProgress"
    OUT_FOR_DELIVERY = "outForDelivery"
    DELIVERED = "delivered"


class ResolvedIdentity(ValueObject):
    """Binding between a verified bearer token and an internal account.

    Produced once per request by the authentication step and handed to
    the handlers that need to know who is calling.
    """

    auth0_id: str  # Token subject, e.g. "auth0|abc"
    user_id: UserId


class UserProfile(ValueObject):
    """Mutable profile fields of an account."""

    name: str | None = None
    address_line1: str | None = None
    city: str | None = None
    country: str | None = None
