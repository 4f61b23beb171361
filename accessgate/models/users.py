"""Account model definition using SQLAlchemy Core."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    MetaData,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import UUID

metadata = MetaData()

users = Table(
    "users",
    metadata,
    # Internal ID (for joins & performance)
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    # Identity provider subject (the `sub` claim)
    Column("auth0_id", Text, nullable=False, unique=True, index=True),
    Column("email", Text, nullable=False, index=True),
    Column("full_name", Text),
    Column("role", Text, nullable=False, server_default=text("'client'")),
    # Audit
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    CheckConstraint("role IN ('client', 'staff', 'admin')", name="ck_users_role"),
)
