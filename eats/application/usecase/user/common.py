"""Shared user response models."""

from pydantic import Field

from eats.application.usecase.base import ApiModel
from eats.domain.model import User


class UserResponse(ApiModel):
    """Account as returned to its owner."""

    id: str = Field(alias="_id")
    auth0_id: str
    email: str
    name: str | None = None
    address_line1: str | None = None
    city: str | None = None
    country: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            auth0_id=user.auth0_id,
            email=user.email,
            name=user.name,
            address_line1=user.address_line1,
            city=user.city,
            country=user.country,
        )
