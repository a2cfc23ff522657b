from __future__ import annotations

from itertools import islice
from typing import Iterator

from dinereg.application.dto.responses import TableRegistryResponse
from dinereg.application.errors import RestaurantNotFoundError, ValidationError
from dinereg.application.mappers.table_mapper import to_table_response
from dinereg.application.metrics.registry import record_tables_list_request
from dinereg.application.ports.repositories import TableRepository
from dinereg.application.use_cases.pagination import decode_cursor, encode_cursor, ensure_limit
from dinereg.domain.common.errors import FieldValidationError
from dinereg.domain.common.ids import RestaurantId, TableId
from dinereg.domain.table.entities import Table, TableStatus

_STATUS_MAP: dict[str, TableStatus | None] = {
    "all": None,
    "vacant": TableStatus.VACANT,
    "occupied": TableStatus.OCCUPIED,
}


class TableSequence:
    """Lazy view over a restaurant's tables, ordered by id.

    Nothing is read until iteration starts, and every new iteration queries
    the store again, so the sequence can be walked any number of times.
    """

    def __init__(
        self,
        table_repository: TableRepository,
        restaurant_id: RestaurantId,
        status: TableStatus | None,
        after_id: TableId | None = None,
    ) -> None:
        self._table_repository = table_repository
        self.restaurant_id = restaurant_id
        self.status = status
        self.after_id = after_id

    def __iter__(self) -> Iterator[Table]:
        return self._table_repository.iter_for_restaurant(
            restaurant_id=self.restaurant_id,
            status=self.status,
            after_id=self.after_id,
        )

    def after(self, table_id: TableId) -> TableSequence:
        return TableSequence(
            table_repository=self._table_repository,
            restaurant_id=self.restaurant_id,
            status=self.status,
            after_id=table_id,
        )


class ListTables:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(
        self,
        restaurant_id: RestaurantId,
        status: TableStatus | str | None = None,
    ) -> TableSequence:
        try:
            status_filter = TableStatus.parse(status) if status is not None else None
        except FieldValidationError as exc:
            raise ValidationError.from_field_error(exc) from exc

        if not self._table_repository.restaurant_exists(restaurant_id):
            raise RestaurantNotFoundError(restaurant_id)

        record_tables_list_request(
            restaurant_id=str(restaurant_id),
            status=status_filter.value if status_filter else "all",
        )
        return TableSequence(
            table_repository=self._table_repository,
            restaurant_id=restaurant_id,
            status=status_filter,
        )


class ListTablePage:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(
        self,
        restaurant_id: RestaurantId,
        *,
        status: str = "all",
        limit: int = 50,
        cursor: str | None = None,
    ) -> TableRegistryResponse:
        normalized_status = status.strip().lower()
        if normalized_status not in _STATUS_MAP:
            raise ValidationError(
                field="status",
                rule="one_of",
                message=f"invalid table status filter: {status}",
            )
        ensure_limit(limit)
        after_id = TableId(decode_cursor(cursor)) if cursor else None

        sequence = ListTables(self._table_repository).execute(
            restaurant_id=restaurant_id,
            status=_STATUS_MAP[normalized_status],
        )
        if after_id is not None:
            sequence = sequence.after(after_id)

        tables = list(islice(sequence, limit + 1))
        page = tables[:limit]
        next_cursor: str | None = None
        if len(tables) > limit and page:
            next_cursor = encode_cursor(int(page[-1].table_id))

        return TableRegistryResponse(
            tables=[to_table_response(table) for table in page],
            nextCursor=next_cursor,
        )
