"""In-memory user repository for testing."""

from typing import Optional

from eats.domain.error import AlreadyExistsError
from eats.domain.model.user import User
from eats.domain.repository.user import UserRepository
from eats.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same auth0_id uniqueness as the database constraint.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_auth0_id(self, auth0_id: str) -> Optional[User]:
        """Find a user by their Auth0 identity."""
        for user in self._users.values():
            if user.auth0_id == auth0_id:
                return user
        return None

    async def add(self, user: User) -> User:
        """Insert a new user."""
        if any(existing.auth0_id == user.auth0_id for existing in self._users.values()):
            raise AlreadyExistsError("User", user.auth0_id)
        self._users[user.id] = user
        return user

    async def save(self, user: User) -> User:
        """Update an existing user."""
        self._users[user.id] = user
        return user

    def all(self) -> list[User]:
        """Every stored user (test helper)."""
        return list(self._users.values())
