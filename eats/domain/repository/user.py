"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from eats.domain.model.user import User
from eats.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Users are looked up by either of their two keys: the internal id and
    the Auth0 identity. Both are unique.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's internal identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_auth0_id(self, auth0_id: str) -> Optional[User]:
        """Find a user by their Auth0 identity.

        Args:
            auth0_id: Subject claim issued by Auth0

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The inserted user

        Raises:
            AlreadyExistsError: If a user with the same auth0_id exists
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Persist changes to an existing user.

        Args:
            user: The user to update

        Returns:
            The saved user
        """
        pass
