from __future__ import annotations

import logging
from datetime import datetime, timezone

from dinereg.application.dto.requests import UpdateRestaurantRequest
from dinereg.application.dto.responses import RestaurantResponse
from dinereg.application.errors import RestaurantNotFoundError, SlugConflictError, ValidationError
from dinereg.application.mappers.restaurant_mapper import to_restaurant_response
from dinereg.application.metrics.registry import record_conflict
from dinereg.application.ports.repositories import DuplicateSlugError, RestaurantRepository
from dinereg.domain.common.errors import FieldValidationError
from dinereg.domain.common.ids import RestaurantId

logger = logging.getLogger(__name__)


class UpdateRestaurant:
    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(
        self,
        restaurant_id: RestaurantId,
        request_dto: UpdateRestaurantRequest,
    ) -> RestaurantResponse:
        restaurant = self._restaurant_repository.get(restaurant_id)
        if restaurant is None:
            raise RestaurantNotFoundError(restaurant_id)

        changes = request_dto.model_dump(exclude_unset=True)
        try:
            updated = restaurant.revise(changes, now=datetime.now(timezone.utc))
        except FieldValidationError as exc:
            raise ValidationError.from_field_error(exc) from exc

        if updated is restaurant:
            return to_restaurant_response(restaurant)

        try:
            found = self._restaurant_repository.update(updated)
        except DuplicateSlugError as exc:
            record_conflict(kind="slug")
            raise SlugConflictError(updated.slug) from exc
        if not found:
            raise RestaurantNotFoundError(restaurant_id)

        logger.info(
            "restaurant_updated",
            extra={"restaurant_id": int(restaurant_id), "fields": sorted(changes)},
        )
        return to_restaurant_response(updated)
