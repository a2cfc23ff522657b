from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


def _to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class CamelBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class CreateRestaurantRequest(CamelBaseModel):
    name: str | None = None
    slug: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    service_charge_pct: Decimal | None = None
    gst_no: str | None = None
    languages: list[str] | None = None
    is_active: bool | None = None


class UpdateRestaurantRequest(CamelBaseModel):
    name: str | None = None
    slug: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    service_charge_pct: Decimal | None = None
    gst_no: str | None = None
    languages: list[str] | None = None
    is_active: bool | None = None


class CreateTableRequest(CamelBaseModel):
    table_code: str | None = None
    floor_name: str | None = None
    max_seats: int | None = None
    status: str | None = None


class UpdateTableRequest(CamelBaseModel):
    table_code: str | None = None
    floor_name: str | None = None
    max_seats: int | None = None


class SetTableStatusRequest(CamelBaseModel):
    status: str | None = None
