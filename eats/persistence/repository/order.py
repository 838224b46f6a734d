"""PostgreSQL implementation of Order repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from eats.domain.model import Order
from eats.domain.repository import OrderRepository
from eats.domain.value import OrderId, RestaurantId
from eats.persistence.mappers import order_to_dict, row_to_order
from eats.persistence.tables import orders_table


class PostgresOrderRepository(OrderRepository):
    """PostgreSQL implementation of OrderRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, order_id: OrderId) -> Optional[Order]:
        stmt = select(orders_table).where(orders_table.c.id == order_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_order(dict(row)) if row else None

    async def find_by_restaurant_id(self, restaurant_id: RestaurantId) -> list[Order]:
        stmt = (
            select(orders_table)
            .where(orders_table.c.restaurant_id == restaurant_id)
            .order_by(orders_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_order(dict(row)) for row in result.mappings().all()]

    async def save(self, order: Order) -> Order:
        """Insert or update an order."""
        values = order_to_dict(order)
        stmt = insert(orders_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[orders_table.c.id],
            set_={key: stmt.excluded[key] for key in values if key != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return order
