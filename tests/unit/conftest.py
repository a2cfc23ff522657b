from __future__ import annotations

import sys
from dataclasses import replace
from datetime import datetime
from itertools import count
from pathlib import Path
from typing import Iterator

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from dinereg.application.ports.repositories import (
    DuplicateSlugError,
    DuplicateTableCodeError,
    OwnerMissingError,
)
from dinereg.domain.common.ids import RestaurantId, TableId
from dinereg.domain.restaurant.entities import Restaurant, RestaurantDraft
from dinereg.domain.table.entities import Table, TableDraft, TableStatus


class FakeStore:
    def __init__(self) -> None:
        self.restaurants: dict[int, Restaurant] = {}
        self.tables: dict[int, Table] = {}
        self.table_scans = 0
        self._restaurant_ids = count(1)
        self._table_ids = count(1)

    def next_restaurant_id(self) -> RestaurantId:
        return RestaurantId(next(self._restaurant_ids))

    def next_table_id(self) -> TableId:
        return TableId(next(self._table_ids))


class FakeRestaurantRepository:
    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def add(self, draft: RestaurantDraft, now: datetime) -> Restaurant:
        if any(item.slug == draft.slug for item in self._store.restaurants.values()):
            raise DuplicateSlugError(draft.slug)
        restaurant = Restaurant.from_draft(self._store.next_restaurant_id(), draft, created_at=now)
        self._store.restaurants[int(restaurant.restaurant_id)] = restaurant
        return restaurant

    def get(self, restaurant_id: RestaurantId) -> Restaurant | None:
        return self._store.restaurants.get(int(restaurant_id))

    def update(self, restaurant: Restaurant) -> bool:
        key = int(restaurant.restaurant_id)
        if key not in self._store.restaurants:
            return False
        for other_id, other in self._store.restaurants.items():
            if other_id != key and other.slug == restaurant.slug:
                raise DuplicateSlugError(restaurant.slug)
        self._store.restaurants[key] = restaurant
        return True

    def delete(self, restaurant_id: RestaurantId) -> int | None:
        if self._store.restaurants.pop(int(restaurant_id), None) is None:
            return None
        owned = [
            table_id
            for table_id, table in self._store.tables.items()
            if table.restaurant_id == restaurant_id
        ]
        for table_id in owned:
            del self._store.tables[table_id]
        return len(owned)

    def iter_restaurants(
        self,
        is_active: bool | None,
        after_id: RestaurantId | None,
    ) -> Iterator[Restaurant]:
        for key in sorted(self._store.restaurants):
            restaurant = self._store.restaurants[key]
            if after_id is not None and key <= after_id:
                continue
            if is_active is not None and restaurant.is_active != is_active:
                continue
            yield restaurant


class FakeTableRepository:
    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def add(self, restaurant_id: RestaurantId, draft: TableDraft, now: datetime) -> Table:
        if int(restaurant_id) not in self._store.restaurants:
            raise OwnerMissingError(str(restaurant_id))
        if any(
            table.restaurant_id == restaurant_id and table.table_code == draft.table_code
            for table in self._store.tables.values()
        ):
            raise DuplicateTableCodeError(draft.table_code)
        table = Table.from_draft(self._store.next_table_id(), restaurant_id, draft, created_at=now)
        self._store.tables[int(table.table_id)] = table
        return table

    def get(self, table_id: TableId) -> Table | None:
        return self._store.tables.get(int(table_id))

    def restaurant_exists(self, restaurant_id: RestaurantId) -> bool:
        return int(restaurant_id) in self._store.restaurants

    def update(self, table: Table) -> bool:
        key = int(table.table_id)
        if key not in self._store.tables:
            return False
        for other_id, other in self._store.tables.items():
            if (
                other_id != key
                and other.restaurant_id == table.restaurant_id
                and other.table_code == table.table_code
            ):
                raise DuplicateTableCodeError(table.table_code)
        self._store.tables[key] = table
        return True

    def update_status(self, table_id: TableId, status: TableStatus, now: datetime) -> bool:
        current = self._store.tables.get(int(table_id))
        if current is None:
            return False
        self._store.tables[int(table_id)] = replace(current, status=status, updated_at=now)
        return True

    def delete(self, table_id: TableId) -> bool:
        return self._store.tables.pop(int(table_id), None) is not None

    def iter_for_restaurant(
        self,
        restaurant_id: RestaurantId,
        status: TableStatus | None,
        after_id: TableId | None,
    ) -> Iterator[Table]:
        self._store.table_scans += 1
        for key in sorted(self._store.tables):
            table = self._store.tables[key]
            if table.restaurant_id != restaurant_id:
                continue
            if status is not None and table.status != status:
                continue
            if after_id is not None and key <= after_id:
                continue
            yield table


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def restaurant_repository(store: FakeStore) -> FakeRestaurantRepository:
    return FakeRestaurantRepository(store)


@pytest.fixture
def table_repository(store: FakeStore) -> FakeTableRepository:
    return FakeTableRepository(store)
