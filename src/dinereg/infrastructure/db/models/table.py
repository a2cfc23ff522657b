from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from dinereg.infrastructure.db.models.restaurant import ID_TYPE, Base

TABLE_STATUS_VALUES = ("vacant", "occupied")


class TableModel(Base):
    __tablename__ = "tables"
    __table_args__ = (
        UniqueConstraint("restaurant_id", "table_code", name="uq_tables_restaurant_table_code"),
        CheckConstraint("status IN ('vacant', 'occupied')", name="ck_tables_status"),
        CheckConstraint(
            "max_seats IS NULL OR max_seats >= 0",
            name="ck_tables_max_seats_non_negative",
        ),
        Index("ix_tables_restaurant_status", "restaurant_id", "status"),
    )

    id: Mapped[int] = mapped_column(ID_TYPE, primary_key=True, autoincrement=True)
    restaurant_id: Mapped[int] = mapped_column(
        ID_TYPE,
        ForeignKey("restaurants.id", ondelete="CASCADE"),
        nullable=False,
    )
    table_code: Mapped[str] = mapped_column(String(64), nullable=False)
    floor_name: Mapped[str | None] = mapped_column(String(64), nullable=True)
    status: Mapped[str] = mapped_column(
        Enum(*TABLE_STATUS_VALUES, name="table_status"),
        nullable=False,
        server_default="vacant",
    )
    max_seats: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
