from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterator

from sqlalchemy import Engine, delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from dinereg.application.ports.repositories import DuplicateSlugError, RestaurantRepository
from dinereg.domain.common.ids import RestaurantId
from dinereg.domain.restaurant.entities import Restaurant, RestaurantDraft
from dinereg.infrastructure.db.models.restaurant import RestaurantModel, storable_id
from dinereg.infrastructure.db.models.table import TableModel
from dinereg.infrastructure.db.session import get_engine


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _row_values(source: RestaurantDraft | Restaurant) -> dict[str, Any]:
    return {
        "name": source.name,
        "slug": source.slug,
        "phone": source.phone,
        "email": source.email,
        "address": source.address,
        "service_charge_pct": source.service_charge_pct,
        "gst_no": source.gst_no,
        "languages": list(source.languages) if source.languages is not None else None,
        "is_active": source.is_active,
    }


class SqlAlchemyRestaurantRepository(RestaurantRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def add(self, draft: RestaurantDraft, now: datetime) -> Restaurant:
        model = RestaurantModel(**_row_values(draft), created_at=now, updated_at=now)
        with Session(self._engine) as session:
            session.add(model)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateSlugError(f"slug already exists: {draft.slug}") from exc
            restaurant_id = RestaurantId(model.id)

        return Restaurant.from_draft(restaurant_id, draft, created_at=now)

    def get(self, restaurant_id: RestaurantId) -> Restaurant | None:
        if not storable_id(restaurant_id):
            return None
        statement = select(RestaurantModel).where(RestaurantModel.id == int(restaurant_id))
        with Session(self._engine) as session:
            model = session.execute(statement).scalar_one_or_none()

        if model is None:
            return None
        return self._to_domain(model)

    def update(self, restaurant: Restaurant) -> bool:
        statement = (
            update(RestaurantModel)
            .where(RestaurantModel.id == int(restaurant.restaurant_id))
            .values(**_row_values(restaurant), updated_at=restaurant.updated_at)
        )
        with Session(self._engine) as session:
            try:
                result = session.execute(statement)
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateSlugError(f"slug already exists: {restaurant.slug}") from exc
            return result.rowcount == 1

    def delete(self, restaurant_id: RestaurantId) -> int | None:
        """Delete the restaurant and its tables atomically.

        Returns the number of tables removed, or ``None`` when the restaurant
        does not exist. Children are deleted explicitly in the same
        transaction even though the foreign key also cascades.
        """

        if not storable_id(restaurant_id):
            return None

        with Session(self._engine) as session, session.begin():
            found = session.execute(
                select(RestaurantModel.id)
                .where(RestaurantModel.id == int(restaurant_id))
                .with_for_update()
            ).scalar_one_or_none()
            if found is None:
                return None

            tables_result = session.execute(
                delete(TableModel).where(TableModel.restaurant_id == int(restaurant_id))
            )
            session.execute(delete(RestaurantModel).where(RestaurantModel.id == int(restaurant_id)))
            return int(tables_result.rowcount or 0)

    def iter_restaurants(
        self,
        is_active: bool | None,
        after_id: RestaurantId | None,
    ) -> Iterator[Restaurant]:
        statement = select(RestaurantModel)
        if is_active is not None:
            statement = statement.where(RestaurantModel.is_active == is_active)
        if after_id is not None:
            statement = statement.where(RestaurantModel.id > int(after_id))
        statement = statement.order_by(RestaurantModel.id).execution_options(yield_per=100)

        with Session(self._engine) as session:
            for model in session.execute(statement).scalars():
                yield self._to_domain(model)

    def _to_domain(self, model: RestaurantModel) -> Restaurant:
        return Restaurant(
            restaurant_id=RestaurantId(model.id),
            name=model.name,
            slug=model.slug,
            phone=model.phone,
            email=model.email,
            address=model.address,
            service_charge_pct=model.service_charge_pct,
            gst_no=model.gst_no,
            languages=tuple(model.languages) if model.languages is not None else None,
            is_active=bool(model.is_active),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
