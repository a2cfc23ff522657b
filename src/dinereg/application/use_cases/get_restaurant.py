from __future__ import annotations

from itertools import islice

from dinereg.application.dto.responses import RestaurantListResponse, RestaurantResponse
from dinereg.application.errors import RestaurantNotFoundError
from dinereg.application.mappers.restaurant_mapper import to_restaurant_response
from dinereg.application.ports.repositories import RestaurantRepository
from dinereg.application.use_cases.pagination import decode_cursor, encode_cursor, ensure_limit
from dinereg.domain.common.ids import RestaurantId


class GetRestaurant:
    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(self, restaurant_id: RestaurantId) -> RestaurantResponse:
        restaurant = self._restaurant_repository.get(restaurant_id)
        if restaurant is None:
            raise RestaurantNotFoundError(restaurant_id)
        return to_restaurant_response(restaurant)


class ListRestaurants:
    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(
        self,
        *,
        is_active: bool | None = None,
        limit: int = 50,
        cursor: str | None = None,
    ) -> RestaurantListResponse:
        ensure_limit(limit)
        after_id = RestaurantId(decode_cursor(cursor)) if cursor else None

        restaurants = list(
            islice(
                self._restaurant_repository.iter_restaurants(is_active=is_active, after_id=after_id),
                limit + 1,
            )
        )
        page = restaurants[:limit]
        next_cursor: str | None = None
        if len(restaurants) > limit and page:
            next_cursor = encode_cursor(int(page[-1].restaurant_id))

        return RestaurantListResponse(
            restaurants=[to_restaurant_response(restaurant) for restaurant in page],
            nextCursor=next_cursor,
        )
