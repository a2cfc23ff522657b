from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from dinereg.domain.common.errors import FieldValidationError
from dinereg.domain.common.ids import RestaurantId, TableId

TABLE_CODE_MAX_LENGTH = 64
FLOOR_NAME_MAX_LENGTH = 64
MAX_SEATS_LIMIT = 2_147_483_647

EDITABLE_FIELDS = frozenset({"table_code", "floor_name", "max_seats"})


class TableStatus(str, Enum):
    VACANT = "vacant"
    OCCUPIED = "occupied"

    @classmethod
    def parse(cls, value: Any) -> TableStatus:
        if isinstance(value, TableStatus):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        allowed = ", ".join(member.value for member in cls)
        raise FieldValidationError("status", "one_of", f"status must be one of: {allowed}")


def _table_code(value: Any) -> str:
    if value is None:
        raise FieldValidationError("table_code", "required", "table_code is required")
    if not isinstance(value, str):
        raise FieldValidationError("table_code", "type", "table_code must be a string")
    cleaned = value.strip()
    if not cleaned:
        raise FieldValidationError("table_code", "required", "table_code must be non-empty")
    if len(cleaned) > TABLE_CODE_MAX_LENGTH:
        raise FieldValidationError(
            "table_code",
            "max_length",
            f"table_code must be at most {TABLE_CODE_MAX_LENGTH} characters",
        )
    return cleaned


def _floor_name(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise FieldValidationError("floor_name", "type", "floor_name must be a string")
    cleaned = value.strip()
    if len(cleaned) > FLOOR_NAME_MAX_LENGTH:
        raise FieldValidationError(
            "floor_name",
            "max_length",
            f"floor_name must be at most {FLOOR_NAME_MAX_LENGTH} characters",
        )
    return cleaned or None


def _max_seats(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise FieldValidationError("max_seats", "type", "max_seats must be an integer")
    if value < 0 or value > MAX_SEATS_LIMIT:
        raise FieldValidationError(
            "max_seats", "range", f"max_seats must be between 0 and {MAX_SEATS_LIMIT}"
        )
    return value


def _normalize(target: Any) -> None:
    set_ = object.__setattr__
    set_(target, "table_code", _table_code(target.table_code))
    set_(target, "floor_name", _floor_name(target.floor_name))
    set_(target, "max_seats", _max_seats(target.max_seats))
    set_(target, "status", TableStatus.parse(target.status))


@dataclass(frozen=True)
class TableDraft:
    table_code: str
    floor_name: str | None = None
    max_seats: int | None = None
    status: TableStatus = TableStatus.VACANT

    def __post_init__(self) -> None:
        _normalize(self)


@dataclass(frozen=True)
class Table:
    table_id: TableId
    restaurant_id: RestaurantId
    table_code: str
    floor_name: str | None
    status: TableStatus
    max_seats: int | None
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        _normalize(self)

    def with_status(self, status: TableStatus, now: datetime) -> Table:
        if self.status == status:
            return self
        return replace(self, status=status, updated_at=now)

    def revise(self, changes: Mapping[str, Any], now: datetime) -> Table:
        for key in changes:
            if key not in EDITABLE_FIELDS:
                raise FieldValidationError(key, "immutable", f"{key} cannot be changed")
        if not changes:
            return self
        return replace(self, **dict(changes), updated_at=now)

    @classmethod
    def from_draft(
        cls,
        table_id: TableId,
        restaurant_id: RestaurantId,
        draft: TableDraft,
        created_at: datetime,
    ) -> Table:
        return cls(
            table_id=table_id,
            restaurant_id=restaurant_id,
            table_code=draft.table_code,
            floor_name=draft.floor_name,
            status=draft.status,
            max_seats=draft.max_seats,
            created_at=created_at,
            updated_at=created_at,
        )
