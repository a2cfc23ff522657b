from __future__ import annotations

from dinereg.application.dto.responses import TableResponse
from dinereg.domain.table.entities import Table


def to_table_response(table: Table) -> TableResponse:
    return TableResponse(
        tableId=int(table.table_id),
        restaurantId=int(table.restaurant_id),
        tableCode=table.table_code,
        floorName=table.floor_name,
        status=table.status.value,
        maxSeats=table.max_seats,
        createdAt=table.created_at,
        updatedAt=table.updated_at,
    )
