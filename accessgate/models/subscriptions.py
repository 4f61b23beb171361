"""Subscription plan and client subscription models using SQLAlchemy Core."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import UUID

metadata = MetaData()

# Plan catalogue (display metadata only)
subscription_plans = Table(
    "subscription_plans",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(100), nullable=False),
    Column("description", Text),
    Column("price_monthly", Numeric(10, 2), nullable=False),
    Column("is_active", Boolean, nullable=False, server_default=text("true")),
    Column("sort_order", Integer, nullable=False, server_default=text("0")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
)

# Billing history per client; rows are appended on renewal
client_subscriptions = Table(
    "client_subscriptions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "client_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column(
        "plan_id",
        UUID(as_uuid=True),
        ForeignKey("subscription_plans.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    Column("stripe_subscription_id", String(255)),
    Column("status", String(30), nullable=False, server_default=text("'pending'")),
    Column("current_period_start", DateTime(timezone=True)),
    Column("current_period_end", DateTime(timezone=True)),
    Column("cancel_at_period_end", Boolean, nullable=False, server_default=text("false")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    CheckConstraint(
        "status IN ('pending', 'trialing', 'active', 'past_due', 'canceled', "
        "'unpaid', 'incomplete', 'incomplete_expired', 'paused')",
        name="ck_client_subscriptions_status",
    ),
    Index("ix_client_subscriptions_client_created", "client_id", "created_at"),
    # Partial index for the qualifying-subscription lookup
    Index(
        "ix_client_subscriptions_qualifying",
        "client_id",
        "current_period_end",
        postgresql_where=text("status IN ('active', 'trialing')"),
    ),
)
