"""User aggregate root.

A user is created the first time someone signs in through Auth0 and is
bound to that Auth0 identity for its whole life.
"""

from typing import Optional

from eats.domain.model.common import DomainModel
from eats.domain.value import UserId, UserProfile


class User(DomainModel):
    """User account.

    `auth0_id` is the external identity (token subject) and never changes.
    `id` is the internal key used for every cross-reference (restaurants,
    orders).
    """

    id: UserId
    auth0_id: str
    email: str
    name: Optional[str] = None
    address_line1: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None

    def with_profile(self, profile: UserProfile) -> "User":
        """Return a copy whose profile fields are replaced wholesale."""
        return self.model_copy(
            update={
                "name": profile.name,
                "address_line1": profile.address_line1,
                "city": profile.city,
                "country": profile.country,
            }
        )
