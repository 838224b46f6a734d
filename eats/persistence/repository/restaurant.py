"""PostgreSQL implementation of Restaurant repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eats.domain.error import AlreadyExistsError
from eats.domain.model import Restaurant
from eats.domain.repository import RestaurantRepository
from eats.domain.value import RestaurantId, UserId
from eats.persistence.mappers import restaurant_to_dict, row_to_restaurant
from eats.persistence.tables import restaurants_table


class PostgresRestaurantRepository(RestaurantRepository):
    """PostgreSQL implementation of RestaurantRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, restaurant_id: RestaurantId) -> Optional[Restaurant]:
        stmt = select(restaurants_table).where(restaurants_table.c.id == restaurant_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_restaurant(dict(row)) if row else None

    async def find_by_user_id(self, user_id: UserId) -> Optional[Restaurant]:
        stmt = select(restaurants_table).where(restaurants_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_restaurant(dict(row)) if row else None

    async def add(self, restaurant: Restaurant) -> Restaurant:
        stmt = restaurants_table.insert().values(**restaurant_to_dict(restaurant))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise AlreadyExistsError("Restaurant", str(restaurant.user_id)) from e
        return restaurant

    async def save(self, restaurant: Restaurant) -> Restaurant:
        values = restaurant_to_dict(restaurant)
        values.pop("id")
        values.pop("user_id")

        stmt = (
            restaurants_table.update()
            .where(restaurants_table.c.id == restaurant.id)
            .values(**values)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return restaurant
