from __future__ import annotations

from fastapi import APIRouter, Query, Response, status

from dinereg.application.dto.requests import CreateRestaurantRequest, UpdateRestaurantRequest
from dinereg.application.dto.responses import RestaurantListResponse, RestaurantResponse
from dinereg.application.use_cases.create_restaurant import CreateRestaurant
from dinereg.application.use_cases.delete_restaurant import DeleteRestaurant
from dinereg.application.use_cases.get_restaurant import GetRestaurant, ListRestaurants
from dinereg.application.use_cases.update_restaurant import UpdateRestaurant
from dinereg.domain.common.ids import RestaurantId
from dinereg.infrastructure.db.repositories.restaurant_repo import SqlAlchemyRestaurantRepository

router = APIRouter()


def _create_restaurant_use_case() -> CreateRestaurant:
    return CreateRestaurant(restaurant_repository=SqlAlchemyRestaurantRepository())


def _get_restaurant_use_case() -> GetRestaurant:
    return GetRestaurant(restaurant_repository=SqlAlchemyRestaurantRepository())


def _list_restaurants_use_case() -> ListRestaurants:
    return ListRestaurants(restaurant_repository=SqlAlchemyRestaurantRepository())


def _update_restaurant_use_case() -> UpdateRestaurant:
    return UpdateRestaurant(restaurant_repository=SqlAlchemyRestaurantRepository())


def _delete_restaurant_use_case() -> DeleteRestaurant:
    return DeleteRestaurant(restaurant_repository=SqlAlchemyRestaurantRepository())


@router.post(
    "/v1/restaurants",
    response_model=RestaurantResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_restaurant(request_dto: CreateRestaurantRequest) -> RestaurantResponse:
    return _create_restaurant_use_case().execute(request_dto=request_dto)


@router.get("/v1/restaurants", response_model=RestaurantListResponse)
def list_restaurants(
    is_active: bool | None = Query(default=None, alias="isActive"),
    limit: int = Query(default=50),
    cursor: str | None = Query(default=None),
) -> RestaurantListResponse:
    return _list_restaurants_use_case().execute(
        is_active=is_active,
        limit=limit,
        cursor=cursor,
    )


@router.get("/v1/restaurants/{restaurant_id}", response_model=RestaurantResponse)
def get_restaurant(restaurant_id: int) -> RestaurantResponse:
    return _get_restaurant_use_case().execute(restaurant_id=RestaurantId(restaurant_id))


@router.patch("/v1/restaurants/{restaurant_id}", response_model=RestaurantResponse)
def update_restaurant(
    restaurant_id: int,
    request_dto: UpdateRestaurantRequest,
) -> RestaurantResponse:
    return _update_restaurant_use_case().execute(
        restaurant_id=RestaurantId(restaurant_id),
        request_dto=request_dto,
    )


@router.delete("/v1/restaurants/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_restaurant(restaurant_id: int) -> Response:
    _delete_restaurant_use_case().execute(restaurant_id=RestaurantId(restaurant_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
