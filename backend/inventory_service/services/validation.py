from __future__ import annotations

import re
from typing import Any

from inventory_service.core.errors import ValidationError


INVENTORY_NAME_MAX_LENGTH = 255
# Largest value the `inventory.id` INTEGER column can hold.
MAX_ITEM_ID = 2**31 - 1

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)", re.ASCII)
_CHECKED_VALUES = {"on", "true", "1", "yes"}


def parse_item_id(raw: object) -> int | None:
    """
    Best-effort integer parse of an item identifier.

    Mirrors leading-digit coercion: "12" and "12abc" give 12, "abc" and "" give None.
    Callers treat None as "no such item" rather than as a malformed request.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if abs(raw) <= MAX_ITEM_ID else None
    match = _LEADING_INT_RE.match(str(raw))
    if match is None:
        return None
    value = int(match.group(1))
    if abs(value) > MAX_ITEM_ID:
        return None
    return value


def require_inventory_name(value: str | None) -> str:
    if value is None or not value.strip():
        raise ValidationError("Inventory name is required")
    if len(value) > INVENTORY_NAME_MAX_LENGTH:
        raise ValidationError(f"Inventory name must be at most {INVENTORY_NAME_MAX_LENGTH} characters")
    return value


def require_update_fields(inventory_name: str | None, description: str | None) -> dict[str, Any]:
    changes: dict[str, Any] = {}
    # A blank name is ignored rather than clearing the required field.
    if inventory_name is not None and inventory_name.strip():
        changes["inventory_name"] = require_inventory_name(inventory_name)
    if description is not None:
        changes["description"] = description
    if not changes:
        raise ValidationError("At least one of inventory_name or description is required")
    return changes


def is_checked(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _CHECKED_VALUES
