from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class RestaurantResponse(BaseModel):
    restaurantId: int
    name: str
    slug: str
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    serviceChargePct: Decimal
    gstNo: str | None = None
    languages: list[str] | None = None
    isActive: bool
    createdAt: datetime
    updatedAt: datetime


class RestaurantListResponse(BaseModel):
    restaurants: list[RestaurantResponse] = Field(default_factory=list)
    nextCursor: str | None = None


class TableResponse(BaseModel):
    tableId: int
    restaurantId: int
    tableCode: str
    floorName: str | None = None
    status: str
    maxSeats: int | None = None
    createdAt: datetime
    updatedAt: datetime


class TableRegistryResponse(BaseModel):
    tables: list[TableResponse] = Field(default_factory=list)
    nextCursor: str | None = None
