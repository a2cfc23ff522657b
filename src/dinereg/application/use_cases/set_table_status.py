from __future__ import annotations

import logging
from datetime import datetime, timezone

from dinereg.application.dto.responses import TableResponse
from dinereg.application.errors import TableNotFoundError, ValidationError
from dinereg.application.mappers.table_mapper import to_table_response
from dinereg.application.metrics.registry import record_status_transition
from dinereg.application.ports.repositories import TableRepository
from dinereg.domain.common.errors import FieldValidationError
from dinereg.domain.common.ids import TableId
from dinereg.domain.table.entities import TableStatus

logger = logging.getLogger(__name__)


class SetTableStatus:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(self, table_id: TableId, status: TableStatus | str | None) -> TableResponse:
        table = self._table_repository.get(table_id)
        if table is None:
            raise TableNotFoundError(table_id)

        try:
            new_status = TableStatus.parse(status)
        except FieldValidationError as exc:
            raise ValidationError.from_field_error(exc) from exc

        updated = table.with_status(new_status, now=datetime.now(timezone.utc))
        if updated is table:
            return to_table_response(table)

        if not self._table_repository.update_status(
            table_id=table_id,
            status=new_status,
            now=updated.updated_at,
        ):
            raise TableNotFoundError(table_id)

        record_status_transition(from_status=table.status, to_status=new_status)
        logger.info(
            "table_status_changed",
            extra={
                "restaurant_id": int(table.restaurant_id),
                "table_id": int(table_id),
                "from_status": table.status.value,
                "status": new_status.value,
            },
        )
        return to_table_response(updated)
