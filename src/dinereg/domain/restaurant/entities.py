from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from dinereg.domain.common.errors import FieldValidationError
from dinereg.domain.common.ids import RestaurantId

NAME_MAX_LENGTH = 255
SLUG_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 255
GST_NO_MAX_LENGTH = 255

SERVICE_CHARGE_MIN = Decimal("0.00")
SERVICE_CHARGE_MAX = Decimal("100.00")
_CENTS = Decimal("0.01")

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2,3}(?:-[A-Za-z0-9]{2,8})*$")

MUTABLE_FIELDS = frozenset(
    {
        "name",
        "slug",
        "phone",
        "email",
        "address",
        "service_charge_pct",
        "gst_no",
        "languages",
        "is_active",
    }
)


def _required_text(field_name: str, value: Any, max_length: int) -> str:
    if value is None:
        raise FieldValidationError(field_name, "required", f"{field_name} is required")
    if not isinstance(value, str):
        raise FieldValidationError(field_name, "type", f"{field_name} must be a string")
    cleaned = value.strip()
    if not cleaned:
        raise FieldValidationError(field_name, "required", f"{field_name} must be non-empty")
    if len(cleaned) > max_length:
        raise FieldValidationError(
            field_name, "max_length", f"{field_name} must be at most {max_length} characters"
        )
    return cleaned


def _optional_text(field_name: str, value: Any, max_length: int | None = None) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise FieldValidationError(field_name, "type", f"{field_name} must be a string")
    cleaned = value.strip()
    if not cleaned:
        return None
    if max_length is not None and len(cleaned) > max_length:
        raise FieldValidationError(
            field_name, "max_length", f"{field_name} must be at most {max_length} characters"
        )
    return cleaned


def _service_charge(value: Any) -> Decimal:
    if value is None:
        return SERVICE_CHARGE_MIN
    if isinstance(value, bool):
        raise FieldValidationError(
            "service_charge_pct", "decimal", "service_charge_pct must be a decimal number"
        )
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise FieldValidationError(
            "service_charge_pct", "decimal", "service_charge_pct must be a decimal number"
        ) from exc
    if not amount.is_finite():
        raise FieldValidationError(
            "service_charge_pct", "decimal", "service_charge_pct must be a decimal number"
        )
    if amount < SERVICE_CHARGE_MIN or amount > SERVICE_CHARGE_MAX:
        raise FieldValidationError(
            "service_charge_pct", "range", "service_charge_pct must be between 0.00 and 100.00"
        )
    quantized = amount.quantize(_CENTS)
    if amount != quantized:
        raise FieldValidationError(
            "service_charge_pct",
            "precision",
            "service_charge_pct must have at most 2 decimal places",
        )
    return quantized


def _languages(value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise FieldValidationError("languages", "type", "languages must be a list of codes")

    codes: list[str] = []
    for raw in value:
        if not isinstance(raw, str) or not LANGUAGE_CODE_PATTERN.match(raw.strip()):
            raise FieldValidationError(
                "languages", "format", f"invalid language code: {raw!r}"
            )
        code = raw.strip()
        if code in codes:
            raise FieldValidationError("languages", "unique", f"duplicate language code: {code}")
        codes.append(code)
    return tuple(codes)


def _normalize(target: Any) -> None:
    """Validate and canonicalize the onboarding fields shared by drafts and records."""

    set_ = object.__setattr__
    set_(target, "name", _required_text("name", target.name, NAME_MAX_LENGTH))

    slug = _required_text("slug", target.slug, SLUG_MAX_LENGTH)
    if not SLUG_PATTERN.match(slug):
        raise FieldValidationError(
            "slug", "format", "slug must be lowercase letters and digits separated by hyphens"
        )
    set_(target, "slug", slug)

    set_(target, "phone", _optional_text("phone", target.phone, PHONE_MAX_LENGTH))

    email = _optional_text("email", target.email, EMAIL_MAX_LENGTH)
    if email is not None:
        local, at, domain = email.partition("@")
        if not at or not local or not domain or "@" in domain or any(c.isspace() for c in email):
            raise FieldValidationError("email", "format", "email must be a valid address")
    set_(target, "email", email)

    set_(target, "address", _optional_text("address", target.address))
    set_(target, "service_charge_pct", _service_charge(target.service_charge_pct))
    set_(target, "gst_no", _optional_text("gst_no", target.gst_no, GST_NO_MAX_LENGTH))
    set_(target, "languages", _languages(target.languages))

    if not isinstance(target.is_active, bool):
        raise FieldValidationError("is_active", "type", "is_active must be a boolean")


@dataclass(frozen=True)
class RestaurantDraft:
    name: str
    slug: str
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    service_charge_pct: Decimal = SERVICE_CHARGE_MIN
    gst_no: str | None = None
    languages: tuple[str, ...] | None = None
    is_active: bool = True

    def __post_init__(self) -> None:
        _normalize(self)


@dataclass(frozen=True)
class Restaurant:
    restaurant_id: RestaurantId
    name: str
    slug: str
    phone: str | None
    email: str | None
    address: str | None
    service_charge_pct: Decimal
    gst_no: str | None
    languages: tuple[str, ...] | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        _normalize(self)

    def revise(self, changes: Mapping[str, Any], now: datetime) -> Restaurant:
        """Return a copy with ``changes`` applied; unknown or immutable fields are rejected."""

        for key in changes:
            if key not in MUTABLE_FIELDS:
                raise FieldValidationError(key, "immutable", f"{key} cannot be changed")
        if not changes:
            return self
        return replace(self, **dict(changes), updated_at=now)

    @classmethod
    def from_draft(
        cls,
        restaurant_id: RestaurantId,
        draft: RestaurantDraft,
        created_at: datetime,
    ) -> Restaurant:
        values = {item.name: getattr(draft, item.name) for item in fields(draft)}
        return cls(
            restaurant_id=restaurant_id,
            created_at=created_at,
            updated_at=created_at,
            **values,
        )
