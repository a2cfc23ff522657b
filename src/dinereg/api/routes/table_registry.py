from __future__ import annotations

from fastapi import APIRouter, Query

from dinereg.application.dto.responses import TableRegistryResponse
from dinereg.application.use_cases.list_tables import ListTablePage
from dinereg.domain.common.ids import RestaurantId
from dinereg.infrastructure.db.repositories.table_repo import SqlAlchemyTableRepository

router = APIRouter()


def _list_table_page_use_case() -> ListTablePage:
    return ListTablePage(table_repository=SqlAlchemyTableRepository())


@router.get("/v1/restaurants/{restaurant_id}/tables", response_model=TableRegistryResponse)
def list_tables(
    restaurant_id: int,
    status: str = Query(default="all"),
    limit: int = Query(default=50),
    cursor: str | None = Query(default=None),
) -> TableRegistryResponse:
    return _list_table_page_use_case().execute(
        restaurant_id=RestaurantId(restaurant_id),
        status=status,
        limit=limit,
        cursor=cursor,
    )
