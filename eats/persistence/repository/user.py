"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eats.domain.error import AlreadyExistsError
from eats.domain.model import User
from eats.domain.repository import UserRepository
from eats.domain.value import UserId
from eats.persistence.mappers import row_to_user, user_to_dict
from eats.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_auth0_id(self, auth0_id: str) -> Optional[User]:
        """Find a user by their Auth0 identity."""
        stmt = select(users_table).where(users_table.c.auth0_id == auth0_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def add(self, user: User) -> User:
        """Insert a new user.

        The insert runs in a SAVEPOINT so that a unique violation on
        auth0_id leaves the request's transaction usable.

        Raises:
            AlreadyExistsError: If auth0_id is already bound
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise AlreadyExistsError("User", user.auth0_id) from e
        return user

    async def save(self, user: User) -> User:
        """Update an existing user.

        The identity columns (id, auth0_id) are never written here.
        """
        values = user_to_dict(user)
        values.pop("id")
        values.pop("auth0_id")

        stmt = users_table.update().where(users_table.c.id == user.id).values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
        return user
