"""create workers and shift_assignments

Revision ID: 3c9a1e7f52d4
Revises:
Create Date: 2026-10-19 10:12:41.503118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c9a1e7f52d4'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        "workers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("code", sa.String(length=32), nullable=False),
        sa.UniqueConstraint("code", name="uq_workers_code"),
    )
    op.create_index("ix_workers_name", "workers", ["name"])

    # (worker_id, date) uniqueness is what makes the upsert atomic
    op.create_table(
        "shift_assignments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "worker_id",
            sa.Integer(),
            sa.ForeignKey("workers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("shift_type", sa.String(length=16), nullable=False),
        sa.UniqueConstraint("worker_id", "date", name="uq_shift_assignment_worker_date"),
    )
    op.create_index("ix_shift_assignments_date", "shift_assignments", ["date"])


def downgrade():
    op.drop_index("ix_shift_assignments_date", table_name="shift_assignments")
    op.drop_table("shift_assignments")
    op.drop_index("ix_workers_name", table_name="workers")
    op.drop_table("workers")
