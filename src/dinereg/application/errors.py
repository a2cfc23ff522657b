from __future__ import annotations

from typing import Any

from dinereg.domain.common.errors import FieldValidationError


class RegistryError(Exception):
    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class ValidationError(RegistryError):
    def __init__(self, field: str, rule: str, message: str) -> None:
        super().__init__(message, details={"field": field, "rule": rule})
        self.field = field
        self.rule = rule

    @classmethod
    def from_field_error(cls, exc: FieldValidationError) -> ValidationError:
        return cls(field=exc.field, rule=exc.rule, message=str(exc))


class NotFoundError(RegistryError):
    pass


class RestaurantNotFoundError(NotFoundError):
    def __init__(self, restaurant_id: int) -> None:
        super().__init__(
            f"restaurant {restaurant_id} not found",
            details={"restaurantId": restaurant_id},
        )


class TableNotFoundError(NotFoundError):
    def __init__(self, table_id: int) -> None:
        super().__init__(f"table {table_id} not found", details={"tableId": table_id})


class ConflictError(RegistryError):
    pass


class SlugConflictError(ConflictError):
    def __init__(self, slug: str) -> None:
        super().__init__(
            f"slug {slug!r} is already taken",
            details={"field": "slug", "slug": slug},
        )


class TableCodeConflictError(ConflictError):
    def __init__(self, restaurant_id: int, table_code: str) -> None:
        super().__init__(
            f"table_code {table_code!r} already exists for restaurant {restaurant_id}",
            details={
                "field": "table_code",
                "restaurantId": restaurant_id,
                "tableCode": table_code,
            },
        )
