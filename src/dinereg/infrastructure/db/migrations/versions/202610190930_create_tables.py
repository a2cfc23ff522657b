"""create tables

Revision ID: 202610190930
Revises: 202610190900
Create Date: 2026-10-19 09:30:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "202610190930"
down_revision = "202610190900"
branch_labels = None
depends_on = None

ID_TYPE = sa.BigInteger().with_variant(sa.Integer(), "sqlite")
TABLE_STATUS = sa.Enum("vacant", "occupied", name="table_status")


def upgrade() -> None:
    op.create_table(
        "tables",
        sa.Column("id", ID_TYPE, autoincrement=True, nullable=False),
        sa.Column("restaurant_id", ID_TYPE, nullable=False),
        sa.Column("table_code", sa.String(length=64), nullable=False),
        sa.Column("floor_name", sa.String(length=64), nullable=True),
        sa.Column("status", TABLE_STATUS, server_default="vacant", nullable=False),
        sa.Column("max_seats", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["restaurant_id"], ["restaurants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("restaurant_id", "table_code", name="uq_tables_restaurant_table_code"),
        sa.CheckConstraint("status IN ('vacant', 'occupied')", name="ck_tables_status"),
        sa.CheckConstraint(
            "max_seats IS NULL OR max_seats >= 0",
            name="ck_tables_max_seats_non_negative",
        ),
    )
    op.create_index(
        "ix_tables_restaurant_status",
        "tables",
        ["restaurant_id", "status"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_tables_restaurant_status", table_name="tables")
    op.drop_table("tables")
    TABLE_STATUS.drop(op.get_bind(), checkfirst=True)
