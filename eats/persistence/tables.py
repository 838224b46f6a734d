"""SQLAlchemy table definitions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("auth0_id", String(255), nullable=False),  # Token subject, immutable
    Column("email", String(255), nullable=False),
    Column("name", String(255), nullable=True),
    Column("address_line1", String(255), nullable=True),
    Column("city", String(255), nullable=True),
    Column("country", String(255), nullable=True),
    # One account per external identity, also under concurrent sign-ups
    UniqueConstraint("auth0_id", name="uq_users_auth0_id"),
)

# ============================================================================
# RESTAURANTS TABLE
# ============================================================================
restaurants_table = Table(
    "restaurants",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("restaurant_name", String(255), nullable=False),
    Column("city", String(255), nullable=False),
    Column("country", String(255), nullable=False),
    Column("delivery_price", Float, nullable=False),
    Column("estimated_delivery_time", Integer, nullable=False),
    Column("cuisines", ARRAY(String(100)), nullable=False, server_default="{}"),
    Column("menu_items", JSONB, nullable=False, server_default="[]"),  # [{id, name, price}]
    Column("image_url", Text, nullable=False),
    Column("last_updated", TIMESTAMP(timezone=True), nullable=False),
    UniqueConstraint("user_id", name="uq_restaurants_user_id"),
)

Index("idx_restaurants_city", restaurants_table.c.city)

# ============================================================================
# ORDERS TABLE
# ============================================================================
orders_table = Table(
    "orders",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "restaurant_id",
        UUID,
        ForeignKey("restaurants.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("delivery_details", JSONB, nullable=False),
    Column("cart_items", JSONB, nullable=False),
    Column("total_amount", Float, nullable=True),
    Column("status", String(32), nullable=False, server_default="placed"),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
)

Index(
    "idx_orders_restaurant_created",
    orders_table.c.restaurant_id,
    orders_table.c.created_at,
)
