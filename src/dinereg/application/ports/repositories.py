from __future__ import annotations

from datetime import datetime
from typing import Iterator, Protocol

from dinereg.domain.common.ids import RestaurantId, TableId
from dinereg.domain.restaurant.entities import Restaurant, RestaurantDraft
from dinereg.domain.table.entities import Table, TableDraft, TableStatus


class RestaurantRepository(Protocol):
    def add(self, draft: RestaurantDraft, now: datetime) -> Restaurant: ...

    def get(self, restaurant_id: RestaurantId) -> Restaurant | None: ...

    def update(self, restaurant: Restaurant) -> bool: ...

    def delete(self, restaurant_id: RestaurantId) -> int | None: ...

    def iter_restaurants(
        self,
        is_active: bool | None,
        after_id: RestaurantId | None,
    ) -> Iterator[Restaurant]: ...


class TableRepository(Protocol):
    def add(self, restaurant_id: RestaurantId, draft: TableDraft, now: datetime) -> Table: ...

    def get(self, table_id: TableId) -> Table | None: ...

    def restaurant_exists(self, restaurant_id: RestaurantId) -> bool: ...

    def update(self, table: Table) -> bool: ...

    def update_status(self, table_id: TableId, status: TableStatus, now: datetime) -> bool: ...

    def delete(self, table_id: TableId) -> bool: ...

    def iter_for_restaurant(
        self,
        restaurant_id: RestaurantId,
        status: TableStatus | None,
        after_id: TableId | None,
    ) -> Iterator[Table]: ...


class DuplicateSlugError(Exception):
    pass


class DuplicateTableCodeError(Exception):
    pass


class OwnerMissingError(Exception):
    pass
