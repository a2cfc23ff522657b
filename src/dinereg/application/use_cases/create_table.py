from __future__ import annotations

import logging
from datetime import datetime, timezone

from dinereg.application.dto.requests import CreateTableRequest
from dinereg.application.dto.responses import TableResponse
from dinereg.application.errors import (
    RestaurantNotFoundError,
    TableCodeConflictError,
    ValidationError,
)
from dinereg.application.mappers.table_mapper import to_table_response
from dinereg.application.metrics.registry import record_conflict, record_table_created
from dinereg.application.ports.repositories import (
    DuplicateTableCodeError,
    OwnerMissingError,
    TableRepository,
)
from dinereg.domain.common.errors import FieldValidationError
from dinereg.domain.common.ids import RestaurantId
from dinereg.domain.table.entities import TableDraft

logger = logging.getLogger(__name__)


class CreateTable:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(self, restaurant_id: RestaurantId, request_dto: CreateTableRequest) -> TableResponse:
        if not self._table_repository.restaurant_exists(restaurant_id):
            raise RestaurantNotFoundError(restaurant_id)

        values = request_dto.model_dump(exclude_none=True)
        try:
            draft = TableDraft(table_code=values.pop("table_code", None), **values)
        except FieldValidationError as exc:
            raise ValidationError.from_field_error(exc) from exc

        try:
            table = self._table_repository.add(
                restaurant_id=restaurant_id,
                draft=draft,
                now=datetime.now(timezone.utc),
            )
        except DuplicateTableCodeError as exc:
            record_conflict(kind="table_code")
            raise TableCodeConflictError(restaurant_id, draft.table_code) from exc
        except OwnerMissingError as exc:
            raise RestaurantNotFoundError(restaurant_id) from exc

        record_table_created(restaurant_id=str(restaurant_id))
        logger.info(
            "table_created",
            extra={
                "restaurant_id": int(restaurant_id),
                "table_id": int(table.table_id),
                "status": table.status.value,
            },
        )
        return to_table_response(table)
