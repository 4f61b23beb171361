"""Create onboarding_progress table

Revision ID: 004
Revises: 003
Create Date: 2026-10-18 00:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

STEP_COLUMNS = [
    "step_1_personal_info",
    "step_2_current_address",
    "step_3_address_history",
    "step_4_employment",
    "step_5_documents",
    "step_6_authorizations",
    "step_7_signature",
]


def upgrade() -> None:
    """Create onboarding_progress table for the seven-step wizard."""
    step_columns = []
    for number, name in enumerate(STEP_COLUMNS, start=1):
        step_columns.append(
            sa.Column(name, sa.Boolean(), nullable=False, server_default=sa.text("false"))
        )
        step_columns.append(
            sa.Column(f"step_{number}_completed_at", sa.TIMESTAMP(timezone=True), nullable=True)
        )

    op.create_table(
        "onboarding_progress",
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
        sa.Column("current_step", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("total_steps", sa.Integer(), nullable=False, server_default=sa.text("7")),
        *step_columns,
        sa.Column("form_data", postgresql.JSONB(), nullable=True),
        sa.Column(
            "status",
            sa.String(30),
            nullable=False,
            server_default=sa.text("'in_progress'"),
        ),
        sa.Column(
            "started_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("completed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "last_activity_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
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
            "status IN ('in_progress', 'completed', 'abandoned', 'expired')",
            name="ck_onboarding_progress_status",
        ),
        sa.CheckConstraint(
            "current_step BETWEEN 1 AND 7",
            name="ck_onboarding_progress_current_step",
        ),
    )

    op.create_index(
        "ix_onboarding_progress_client_id", "onboarding_progress", ["client_id"], unique=True
    )


def downgrade() -> None:
    """Drop onboarding_progress table."""
    op.drop_index("ix_onboarding_progress_client_id", table_name="onboarding_progress")
    op.drop_table("onboarding_progress")
