from __future__ import annotations

import logging
from datetime import datetime, timezone

from dinereg.application.dto.requests import UpdateTableRequest
from dinereg.application.dto.responses import TableResponse
from dinereg.application.errors import TableCodeConflictError, TableNotFoundError, ValidationError
from dinereg.application.mappers.table_mapper import to_table_response
from dinereg.application.metrics.registry import record_conflict
from dinereg.application.ports.repositories import DuplicateTableCodeError, TableRepository
from dinereg.domain.common.errors import FieldValidationError
from dinereg.domain.common.ids import TableId

logger = logging.getLogger(__name__)


class UpdateTable:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(self, table_id: TableId, request_dto: UpdateTableRequest) -> TableResponse:
        table = self._table_repository.get(table_id)
        if table is None:
            raise TableNotFoundError(table_id)

        changes = request_dto.model_dump(exclude_unset=True)
        try:
            updated = table.revise(changes, now=datetime.now(timezone.utc))
        except FieldValidationError as exc:
            raise ValidationError.from_field_error(exc) from exc

        if updated is table:
            return to_table_response(table)

        try:
            found = self._table_repository.update(updated)
        except DuplicateTableCodeError as exc:
            record_conflict(kind="table_code")
            raise TableCodeConflictError(updated.restaurant_id, updated.table_code) from exc
        if not found:
            raise TableNotFoundError(table_id)

        logger.info(
            "table_updated",
            extra={
                "restaurant_id": int(updated.restaurant_id),
                "table_id": int(table_id),
                "fields": sorted(changes),
            },
        )
        return to_table_response(updated)
