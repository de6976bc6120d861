"""Create webinars table.

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create webinars table."""
    op.create_table(
        "webinars",
        sa.Column("id", sa.String(length=255), nullable=False),
        sa.Column("organizer_id", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("seats", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_webinars_organizer_id", "webinars", ["organizer_id"])


def downgrade() -> None:
    """Drop webinars table."""
    op.drop_index("ix_webinars_organizer_id", table_name="webinars")
    op.drop_table("webinars")
