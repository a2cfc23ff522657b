from __future__ import annotations

import logging

from dinereg.application.errors import TableNotFoundError
from dinereg.application.metrics.registry import record_table_deleted
from dinereg.application.ports.repositories import TableRepository
from dinereg.domain.common.ids import TableId

logger = logging.getLogger(__name__)


class DeleteTable:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(self, table_id: TableId) -> None:
        if not self._table_repository.delete(table_id):
            raise TableNotFoundError(table_id)

        record_table_deleted()
        logger.info("table_deleted", extra={"table_id": int(table_id)})
