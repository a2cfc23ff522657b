from __future__ import annotations

from dinereg.application.dto.responses import TableResponse
from dinereg.application.errors import TableNotFoundError
from dinereg.application.mappers.table_mapper import to_table_response
from dinereg.application.ports.repositories import TableRepository
from dinereg.domain.common.ids import TableId


class GetTable:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(self, table_id: TableId) -> TableResponse:
        table = self._table_repository.get(table_id)
        if table is None:
            raise TableNotFoundError(table_id)
        return to_table_response(table)
