from __future__ import annotations

import base64
import binascii

from dinereg.application.errors import ValidationError

MIN_LIMIT = 1
MAX_LIMIT = 200
MAX_CURSOR_ID = 2**63 - 1


def ensure_limit(limit: int) -> int:
    if limit < MIN_LIMIT or limit > MAX_LIMIT:
        raise ValidationError(
            field="limit",
            rule="range",
            message=f"limit must be between {MIN_LIMIT} and {MAX_LIMIT}",
        )
    return limit


def encode_cursor(last_id: int) -> str:
    return base64.urlsafe_b64encode(f"id|{last_id}".encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str) -> int:
    try:
        raw = base64.urlsafe_b64decode(cursor.encode("ascii")).decode("utf-8")
        prefix, value = raw.split("|", 1)
        if prefix != "id":
            raise ValueError(prefix)
        last_id = int(value)
        if not 0 < last_id <= MAX_CURSOR_ID:
            raise ValueError(value)
        return last_id
    except (UnicodeError, binascii.Error, ValueError) as exc:
        raise ValidationError(field="cursor", rule="format", message="invalid cursor") from exc
