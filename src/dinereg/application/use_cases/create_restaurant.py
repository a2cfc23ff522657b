from __future__ import annotations

import logging
from datetime import datetime, timezone

from dinereg.application.dto.requests import CreateRestaurantRequest
from dinereg.application.dto.responses import RestaurantResponse
from dinereg.application.errors import SlugConflictError, ValidationError
from dinereg.application.mappers.restaurant_mapper import to_restaurant_response
from dinereg.application.metrics.registry import record_conflict, record_restaurant_created
from dinereg.application.ports.repositories import DuplicateSlugError, RestaurantRepository
from dinereg.domain.common.errors import FieldValidationError
from dinereg.domain.restaurant.entities import RestaurantDraft

logger = logging.getLogger(__name__)


class CreateRestaurant:
    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(self, request_dto: CreateRestaurantRequest) -> RestaurantResponse:
        # unset optionals fall back to the draft defaults (active, 0.00 service charge)
        values = request_dto.model_dump(exclude_none=True)
        try:
            draft = RestaurantDraft(
                name=values.pop("name", None),
                slug=values.pop("slug", None),
                **values,
            )
        except FieldValidationError as exc:
            raise ValidationError.from_field_error(exc) from exc

        try:
            restaurant = self._restaurant_repository.add(draft, now=datetime.now(timezone.utc))
        except DuplicateSlugError as exc:
            record_conflict(kind="slug")
            raise SlugConflictError(draft.slug) from exc

        record_restaurant_created()
        logger.info(
            "restaurant_created",
            extra={"restaurant_id": int(restaurant.restaurant_id)},
        )
        return to_restaurant_response(restaurant)
