from __future__ import annotations

from datetime import datetime
from typing import Iterator

from sqlalchemy import Engine, delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from dinereg.application.ports.repositories import (
    DuplicateTableCodeError,
    OwnerMissingError,
    TableRepository,
)
from dinereg.domain.common.ids import RestaurantId, TableId
from dinereg.domain.table.entities import Table, TableDraft, TableStatus
from dinereg.infrastructure.db.models.restaurant import RestaurantModel, storable_id
from dinereg.infrastructure.db.models.table import TableModel
from dinereg.infrastructure.db.repositories.restaurant_repo import as_utc
from dinereg.infrastructure.db.session import get_engine


class SqlAlchemyTableRepository(TableRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def add(self, restaurant_id: RestaurantId, draft: TableDraft, now: datetime) -> Table:
        if not storable_id(restaurant_id):
            raise OwnerMissingError(f"restaurant {restaurant_id} not found")
        model = TableModel(
            restaurant_id=int(restaurant_id),
            table_code=draft.table_code,
            floor_name=draft.floor_name,
            status=draft.status.value,
            max_seats=draft.max_seats,
            created_at=now,
            updated_at=now,
        )
        with Session(self._engine) as session:
            session.add(model)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                # the same error covers a vanished owner and a duplicate code
                if not self.restaurant_exists(restaurant_id):
                    raise OwnerMissingError(f"restaurant {restaurant_id} not found") from exc
                raise DuplicateTableCodeError(
                    f"table_code {draft.table_code} already exists for restaurant {restaurant_id}"
                ) from exc
            table_id = TableId(model.id)

        return Table.from_draft(table_id, restaurant_id, draft, created_at=now)

    def get(self, table_id: TableId) -> Table | None:
        if not storable_id(table_id):
            return None
        statement = select(TableModel).where(TableModel.id == int(table_id))
        with Session(self._engine) as session:
            model = session.execute(statement).scalar_one_or_none()

        if model is None:
            return None
        return self._to_domain(model)

    def restaurant_exists(self, restaurant_id: RestaurantId) -> bool:
        if not storable_id(restaurant_id):
            return False
        statement = (
            select(RestaurantModel.id).where(RestaurantModel.id == int(restaurant_id)).limit(1)
        )
        with Session(self._engine) as session:
            value = session.execute(statement).scalar_one_or_none()
        return value is not None

    def update(self, table: Table) -> bool:
        statement = (
            update(TableModel)
            .where(TableModel.id == int(table.table_id))
            .values(
                table_code=table.table_code,
                floor_name=table.floor_name,
                max_seats=table.max_seats,
                updated_at=table.updated_at,
            )
        )
        with Session(self._engine) as session:
            try:
                result = session.execute(statement)
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateTableCodeError(
                    f"table_code {table.table_code} already exists "
                    f"for restaurant {table.restaurant_id}"
                ) from exc
            return result.rowcount == 1

    def update_status(self, table_id: TableId, status: TableStatus, now: datetime) -> bool:
        if not storable_id(table_id):
            return False
        statement = (
            update(TableModel)
            .where(TableModel.id == int(table_id))
            .values(status=status.value, updated_at=now)
        )
        with Session(self._engine) as session:
            result = session.execute(statement)
            session.commit()
            return result.rowcount == 1

    def delete(self, table_id: TableId) -> bool:
        if not storable_id(table_id):
            return False
        with Session(self._engine) as session:
            result = session.execute(delete(TableModel).where(TableModel.id == int(table_id)))
            session.commit()
            return result.rowcount == 1

    def iter_for_restaurant(
        self,
        restaurant_id: RestaurantId,
        status: TableStatus | None,
        after_id: TableId | None,
    ) -> Iterator[Table]:
        if not storable_id(restaurant_id):
            return
        statement = select(TableModel).where(TableModel.restaurant_id == int(restaurant_id))
        if status is not None:
            statement = statement.where(TableModel.status == status.value)
        if after_id is not None:
            statement = statement.where(TableModel.id > int(after_id))
        statement = statement.order_by(TableModel.id).execution_options(yield_per=100)

        with Session(self._engine) as session:
            for model in session.execute(statement).scalars():
                yield self._to_domain(model)

    def _to_domain(self, model: TableModel) -> Table:
        return Table(
            table_id=TableId(model.id),
            restaurant_id=RestaurantId(model.restaurant_id),
            table_code=model.table_code,
            floor_name=model.floor_name,
            status=TableStatus(model.status),
            max_seats=model.max_seats,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
