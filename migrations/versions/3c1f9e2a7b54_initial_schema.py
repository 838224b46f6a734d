"""initial_schema

Create the schema for the Eats backend:
- Users (one account per Auth0 identity)
- Restaurants (at most one per user, menu stored inline)
- Orders (placed with a restaurant, status driven by the owner)

Revision ID: 3c1f9e2a7b54
Revises:
Create Date: 2026-10-19 10:12:41.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9e2a7b54"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("auth0_id", sa.String(255), nullable=False),  # Token subject
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("address_line1", sa.String(255), nullable=True),
        sa.Column("city", sa.String(255), nullable=True),
        sa.Column("country", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        # Concurrent first sign-ins must not create two accounts
        sa.UniqueConstraint("auth0_id", name="uq_users_auth0_id"),
    )

    # ========================================================================
    # RESTAURANTS table
    # ========================================================================
    op.create_table(
        "restaurants",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("restaurant_name", sa.String(255), nullable=False),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("country", sa.String(255), nullable=False),
        sa.Column("delivery_price", sa.Float(), nullable=False),
        sa.Column("estimated_delivery_time", sa.Integer(), nullable=False),
        sa.Column(
            "cuisines",
            postgresql.ARRAY(sa.String(100)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "menu_items",
            postgresql.JSONB(),
            nullable=False,
            server_default="[]",
        ),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("last_updated", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", name="uq_restaurants_user_id"),
    )
    op.create_index("idx_restaurants_city", "restaurants", ["city"])

    # ========================================================================
    # ORDERS table
    # ========================================================================
    op.create_table(
        "orders",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("restaurant_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("delivery_details", postgresql.JSONB(), nullable=False),
        sa.Column("cart_items", postgresql.JSONB(), nullable=False),
        sa.Column("total_amount", sa.Float(), nullable=True),
        sa.Column(
            "status", sa.String(32), nullable=False, server_default="placed"
        ),  # placed, paid, inProgress, outForDelivery, delivered
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["restaurant_id"], ["restaurants.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "idx_orders_restaurant_created", "orders", ["restaurant_id", "created_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_orders_restaurant_created", table_name="orders")
    op.drop_table("orders")
    op.drop_index("idx_restaurants_city", table_name="restaurants")
    op.drop_table("restaurants")
    op.drop_table("users")
