from __future__ import annotations

from fastapi import APIRouter, Response, status

from dinereg.application.dto.requests import (
    CreateTableRequest,
    SetTableStatusRequest,
    UpdateTableRequest,
)
from dinereg.application.dto.responses import TableResponse
from dinereg.application.use_cases.create_table import CreateTable
from dinereg.application.use_cases.delete_table import DeleteTable
from dinereg.application.use_cases.get_table import GetTable
from dinereg.application.use_cases.set_table_status import SetTableStatus
from dinereg.application.use_cases.update_table import UpdateTable
from dinereg.domain.common.ids import RestaurantId, TableId
from dinereg.infrastructure.db.repositories.table_repo import SqlAlchemyTableRepository

router = APIRouter()


def _create_table_use_case() -> CreateTable:
    return CreateTable(table_repository=SqlAlchemyTableRepository())


def _get_table_use_case() -> GetTable:
    return GetTable(table_repository=SqlAlchemyTableRepository())


def _update_table_use_case() -> UpdateTable:
    return UpdateTable(table_repository=SqlAlchemyTableRepository())


def _set_table_status_use_case() -> SetTableStatus:
    return SetTableStatus(table_repository=SqlAlchemyTableRepository())


def _delete_table_use_case() -> DeleteTable:
    return DeleteTable(table_repository=SqlAlchemyTableRepository())


@router.post(
    "/v1/restaurants/{restaurant_id}/tables",
    response_model=TableResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_table(restaurant_id: int, request_dto: CreateTableRequest) -> TableResponse:
    return _create_table_use_case().execute(
        restaurant_id=RestaurantId(restaurant_id),
        request_dto=request_dto,
    )


@router.get("/v1/tables/{table_id}", response_model=TableResponse)
def get_table(table_id: int) -> TableResponse:
    return _get_table_use_case().execute(table_id=TableId(table_id))


@router.patch("/v1/tables/{table_id}", response_model=TableResponse)
def update_table(table_id: int, request_dto: UpdateTableRequest) -> TableResponse:
    return _update_table_use_case().execute(
        table_id=TableId(table_id),
        request_dto=request_dto,
    )


@router.put("/v1/tables/{table_id}/status", response_model=TableResponse)
def set_table_status(table_id: int, request_dto: SetTableStatusRequest) -> TableResponse:
    return _set_table_status_use_case().execute(
        table_id=TableId(table_id),
        status=request_dto.status,
    )


@router.delete("/v1/tables/{table_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_table(table_id: int) -> Response:
    _delete_table_use_case().execute(table_id=TableId(table_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
