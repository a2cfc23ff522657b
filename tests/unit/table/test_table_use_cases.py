from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from dinereg.application.dto.requests import (
    CreateRestaurantRequest,
    CreateTableRequest,
    UpdateTableRequest,
)
from dinereg.application.errors import (
    RestaurantNotFoundError,
    TableCodeConflictError,
    TableNotFoundError,
    ValidationError,
)
from dinereg.application.use_cases.create_restaurant import CreateRestaurant
from dinereg.application.use_cases.create_table import CreateTable
from dinereg.application.use_cases.delete_table import DeleteTable
from dinereg.application.use_cases.get_table import GetTable
from dinereg.application.use_cases.set_table_status import SetTableStatus
from dinereg.application.use_cases.update_table import UpdateTable
from dinereg.domain.common.ids import RestaurantId, TableId
from dinereg.domain.table.entities import TableStatus


def _restaurant(repository, slug: str = "cafe-x") -> RestaurantId:
    created = CreateRestaurant(restaurant_repository=repository).execute(
        CreateRestaurantRequest(name=slug.title(), slug=slug)
    )
    return RestaurantId(created.restaurantId)


def _table(table_repository, restaurant_id: RestaurantId, code: str = "F0T1", **fields):
    return CreateTable(table_repository=table_repository).execute(
        restaurant_id, CreateTableRequest(table_code=code, **fields)
    )


def test_create_table_defaults_to_vacant(restaurant_repository, table_repository) -> None:
    restaurant_id = _restaurant(restaurant_repository)

    table = _table(table_repository, restaurant_id, floor_name="F0", max_seats=4)

    assert table.status == "vacant"
    assert table.restaurantId == restaurant_id
    assert table.floorName == "F0"
    assert table.maxSeats == 4


def test_create_table_with_explicit_status(restaurant_repository, table_repository) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    table = _table(table_repository, restaurant_id, status="occupied")
    assert table.status == "occupied"


def test_create_table_for_unknown_restaurant(table_repository) -> None:
    with pytest.raises(RestaurantNotFoundError):
        _table(table_repository, RestaurantId(42))


def test_duplicate_code_in_same_restaurant(restaurant_repository, table_repository) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    _table(table_repository, restaurant_id, "F0T1")

    with pytest.raises(TableCodeConflictError) as exc_info:
        _table(table_repository, restaurant_id, "F0T1")
    assert exc_info.value.details["tableCode"] == "F0T1"


def test_same_code_in_different_restaurants(restaurant_repository, table_repository) -> None:
    first = _restaurant(restaurant_repository, "cafe-x")
    second = _restaurant(restaurant_repository, "cafe-y")

    one = _table(table_repository, first, "F0T1")
    two = _table(table_repository, second, "F0T1")

    assert one.tableId != two.tableId


@pytest.mark.parametrize(
    ("fields", "field"),
    [
        ({"table_code": None}, "table_code"),
        ({"table_code": "X" * 65}, "table_code"),
        ({"table_code": "F0T1", "status": "reserved"}, "status"),
        ({"table_code": "F0T1", "max_seats": -2}, "max_seats"),
    ],
)
def test_create_table_validation(
    restaurant_repository, table_repository, fields, field: str
) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    with pytest.raises(ValidationError) as exc_info:
        CreateTable(table_repository=table_repository).execute(
            restaurant_id, CreateTableRequest(**fields)
        )
    assert exc_info.value.field == field


def test_set_status_toggles(restaurant_repository, table_repository) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    table = _table(table_repository, restaurant_id)
    use_case = SetTableStatus(table_repository=table_repository)

    occupied = use_case.execute(TableId(table.tableId), "occupied")
    assert occupied.status == "occupied"
    assert occupied.updatedAt >= table.updatedAt

    vacant = use_case.execute(TableId(table.tableId), TableStatus.VACANT)
    assert vacant.status == "vacant"


def test_set_same_status_twice_is_idempotent(
    restaurant_repository, table_repository, store
) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    table = _table(table_repository, restaurant_id)
    use_case = SetTableStatus(table_repository=table_repository)

    first = use_case.execute(TableId(table.tableId), "vacant")
    second = use_case.execute(TableId(table.tableId), "vacant")

    assert first.status == second.status == "vacant"
    assert second.updatedAt == table.updatedAt
    assert store.tables[table.tableId].status == TableStatus.VACANT


def test_set_status_rejects_unknown_value(restaurant_repository, table_repository) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    table = _table(table_repository, restaurant_id)

    with pytest.raises(ValidationError) as exc_info:
        SetTableStatus(table_repository=table_repository).execute(
            TableId(table.tableId), "reserved"
        )
    assert exc_info.value.field == "status"
    assert exc_info.value.rule == "one_of"


def test_set_status_for_unknown_table(table_repository) -> None:
    with pytest.raises(TableNotFoundError):
        SetTableStatus(table_repository=table_repository).execute(TableId(9), "occupied")


def test_get_table(restaurant_repository, table_repository) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    table = _table(table_repository, restaurant_id, "F1T5")

    fetched = GetTable(table_repository=table_repository).execute(TableId(table.tableId))
    assert fetched == table

    with pytest.raises(TableNotFoundError):
        GetTable(table_repository=table_repository).execute(TableId(404))


def test_update_table_layout(restaurant_repository, table_repository) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    table = _table(table_repository, restaurant_id, "F0T1", floor_name="F0", max_seats=2)

    updated = UpdateTable(table_repository=table_repository).execute(
        TableId(table.tableId),
        UpdateTableRequest(table_code="F1T1", floor_name="Floor 1", max_seats=6),
    )

    assert updated.tableCode == "F1T1"
    assert updated.floorName == "Floor 1"
    assert updated.maxSeats == 6
    assert updated.status == "vacant"


def test_update_table_clears_optional_fields(restaurant_repository, table_repository) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    table = _table(table_repository, restaurant_id, floor_name="F0", max_seats=2)

    updated = UpdateTable(table_repository=table_repository).execute(
        TableId(table.tableId),
        UpdateTableRequest(floor_name=None, max_seats=None),
    )

    assert updated.floorName is None
    assert updated.maxSeats is None


def test_update_table_code_conflict(restaurant_repository, table_repository) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    _table(table_repository, restaurant_id, "F0T1")
    second = _table(table_repository, restaurant_id, "F0T2")

    with pytest.raises(TableCodeConflictError):
        UpdateTable(table_repository=table_repository).execute(
            TableId(second.tableId),
            UpdateTableRequest(table_code="F0T1"),
        )


def test_update_table_cannot_clear_code(restaurant_repository, table_repository) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    table = _table(table_repository, restaurant_id)

    with pytest.raises(ValidationError) as exc_info:
        UpdateTable(table_repository=table_repository).execute(
            TableId(table.tableId),
            UpdateTableRequest(table_code=None),
        )
    assert exc_info.value.field == "table_code"


def test_delete_table(restaurant_repository, table_repository, store) -> None:
    restaurant_id = _restaurant(restaurant_repository)
    table = _table(table_repository, restaurant_id)

    DeleteTable(table_repository=table_repository).execute(TableId(table.tableId))

    assert store.tables == {}
    with pytest.raises(TableNotFoundError):
        DeleteTable(table_repository=table_repository).execute(TableId(table.tableId))
