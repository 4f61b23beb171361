"""Create subscription_plans and client_subscriptions tables

Revision ID: 003
Revises: 002
Create Date: 2026-10-01 00:20:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create plan catalogue and subscription history tables."""

    # ===================================================================
    # SUBSCRIPTION PLANS - display metadata for the pricing page
    # ===================================================================
    op.create_table(
        "subscription_plans",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price_monthly", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )

    # ===================================================================
    # CLIENT SUBSCRIPTIONS - one row per billing subscription
    # ===================================================================
    op.create_table(
        "client_subscriptions",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column(
            "client_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "plan_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("subscription_plans.id", ondelete="RESTRICT"),
            nullable=True,
        ),
        sa.Column("stripe_subscription_id", sa.String(255), nullable=True),
        sa.Column("status", sa.String(30), nullable=False, server_default=sa.text("'pending'")),
        sa.Column("current_period_start", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("current_period_end", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "cancel_at_period_end",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'trialing', 'active', 'past_due', 'canceled', "
            "'unpaid', 'incomplete', 'incomplete_expired', 'paused')",
            name="ck_client_subscriptions_status",
        ),
    )

    op.create_index("ix_client_subscriptions_client_id", "client_subscriptions", ["client_id"])
    op.create_index(
        "ix_client_subscriptions_client_created",
        "client_subscriptions",
        ["client_id", "created_at"],
    )
    # Partial index for the qualifying-subscription lookup
    op.create_index(
        "ix_client_subscriptions_qualifying",
        "client_subscriptions",
        ["client_id", "current_period_end"],
        postgresql_where=sa.text("status IN ('active', 'trialing')"),
    )


def downgrade() -> None:
    """Drop subscription tables."""
    op.drop_index("ix_client_subscriptions_qualifying", table_name="client_subscriptions")
    op.drop_index("ix_client_subscriptions_client_created", table_name="client_subscriptions")
    op.drop_index("ix_client_subscriptions_client_id", table_name="client_subscriptions")
    op.drop_table("client_subscriptions")
    op.drop_table("subscription_plans")
