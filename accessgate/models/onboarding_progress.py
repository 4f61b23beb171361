"""Onboarding wizard progress model using SQLAlchemy Core."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, UUID

from accessgate.core.onboarding import ONBOARDING_STEPS, TOTAL_ONBOARDING_STEPS

metadata = MetaData()

# One row per client; step flags only ever go from false to true
onboarding_progress = Table(
    "onboarding_progress",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "client_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    ),
    Column("current_step", Integer, nullable=False, server_default=text("1")),
    Column(
        "total_steps",
        Integer,
        nullable=False,
        server_default=text(str(TOTAL_ONBOARDING_STEPS)),
    ),
    *(
        column
        for step in ONBOARDING_STEPS
        for column in (
            Column(step.column, Boolean, nullable=False, server_default=text("false")),
            Column(step.completed_at_column, DateTime(timezone=True)),
        )
    ),
    # Form answers kept between sessions
    Column("form_data", JSONB),
    Column("status", String(30), nullable=False, server_default=text("'in_progress'")),
    Column("started_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("completed_at", DateTime(timezone=True)),
    Column(
        "last_activity_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    # Audit
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=text("NOW()")),
    CheckConstraint(
        "status IN ('in_progress', 'completed', 'abandoned', 'expired')",
        name="ck_onboarding_progress_status",
    ),
    CheckConstraint(
        f"current_step BETWEEN 1 AND {TOTAL_ONBOARDING_STEPS}",
        name="ck_onboarding_progress_current_step",
    ),
)
