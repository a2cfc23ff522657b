from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import inspect, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from dinereg.infrastructure.db.models.restaurant import RestaurantModel
from dinereg.infrastructure.db.models.table import TableModel
from dinereg.infrastructure.db.session import get_engine

DEMO_SLUG = "cafe-x"

DEMO_TABLES = [
    {"table_code": "F0T1", "floor_name": "F0", "max_seats": 4},
    {"table_code": "F0T2", "floor_name": "F0", "max_seats": 2},
    {"table_code": "F1T1", "floor_name": "Floor 1", "max_seats": 6},
]


def main() -> None:
    engine = get_engine(timeout_seconds=2.0)
    if not {"restaurants", "tables"}.issubset(set(inspect(engine).get_table_names())):
        print("no schema yet")
        return

    insert = postgresql_insert if engine.dialect.name == "postgresql" else sqlite_insert
    now = datetime.now(timezone.utc)

    with Session(engine) as session:
        session.execute(
            insert(RestaurantModel)
            .values(
                name="Cafe X",
                slug=DEMO_SLUG,
                phone="+91 80 4000 1234",
                email="hello@cafe-x.example",
                address="12 Residency Road, Bengaluru",
                service_charge_pct=Decimal("5.00"),
                languages=["en", "hi"],
                is_active=True,
                created_at=now,
                updated_at=now,
            )
            .on_conflict_do_nothing(index_elements=[RestaurantModel.slug])
        )
        restaurant_id = session.execute(
            select(RestaurantModel.id).where(RestaurantModel.slug == DEMO_SLUG)
        ).scalar_one()

        for table in DEMO_TABLES:
            session.execute(
                insert(TableModel)
                .values(
                    restaurant_id=restaurant_id,
                    status="vacant",
                    created_at=now,
                    updated_at=now,
                    **table,
                )
                .on_conflict_do_nothing(
                    index_elements=[TableModel.restaurant_id, TableModel.table_code]
                )
            )

        session.commit()
        print("seed complete")


if __name__ == "__main__":
    main()
