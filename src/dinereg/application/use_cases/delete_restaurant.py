from __future__ import annotations

import logging

from dinereg.application.errors import RestaurantNotFoundError
from dinereg.application.metrics.registry import record_restaurant_deleted
from dinereg.application.ports.repositories import RestaurantRepository
from dinereg.domain.common.ids import RestaurantId

logger = logging.getLogger(__name__)


class DeleteRestaurant:
    """Remove a restaurant together with every table it owns.

    The repository performs the cascade in a single transaction, so readers
    never observe the restaurant gone while some of its tables remain.
    """

    def __init__(self, restaurant_repository: RestaurantRepository) -> None:
        self._restaurant_repository = restaurant_repository

    def execute(self, restaurant_id: RestaurantId) -> None:
        tables_deleted = self._restaurant_repository.delete(restaurant_id)
        if tables_deleted is None:
            raise RestaurantNotFoundError(restaurant_id)

        record_restaurant_deleted(tables_deleted=tables_deleted)
        logger.info(
            "restaurant_deleted",
            extra={"restaurant_id": int(restaurant_id), "tables_deleted": tables_deleted},
        )
