from __future__ import annotations

import pytest

from inventory_service.core.errors import ValidationError
from inventory_service.services.validation import (
    is_checked,
    parse_item_id,
    require_inventory_name,
    require_update_fields,
)


def test_parse_item_id_coerces_leading_digits() -> None:
    assert parse_item_id("12") == 12
    assert parse_item_id(" 7") == 7
    assert parse_item_id("12abc") == 12
    assert parse_item_id(5) == 5


def test_parse_item_id_returns_none_for_non_numeric() -> None:
    assert parse_item_id("abc") is None
    assert parse_item_id("") is None
    assert parse_item_id(None) is None
    assert parse_item_id(True) is None
    # Non-ASCII digits (Arabic-Indic, full-width) never name an item.
    assert parse_item_id("١") is None
    assert parse_item_id("１2") is None


def test_require_inventory_name_rejects_missing_and_blank() -> None:
    for value in (None, "", "   "):
        with pytest.raises(ValidationError) as exc:
            require_inventory_name(value)
        assert exc.value.message == "Inventory name is required"
        assert exc.value.status_code == 400


def test_require_inventory_name_rejects_overlong_names() -> None:
    assert require_inventory_name("x" * 255) == "x" * 255
    with pytest.raises(ValidationError):
        require_inventory_name("x" * 256)


def test_require_update_fields_keeps_only_supplied_fields() -> None:
    assert require_update_fields("Drill", None) == {"inventory_name": "Drill"}
    assert require_update_fields(None, "Cordless") == {"description": "Cordless"}
    # Clearing the description is a real update.
    assert require_update_fields(None, "") == {"description": ""}
    # A blank name is ignored, not applied.
    assert require_update_fields("  ", "Cordless") == {"description": "Cordless"}


def test_require_update_fields_rejects_empty_update() -> None:
    with pytest.raises(ValidationError):
        require_update_fields(None, None)
    with pytest.raises(ValidationError):
        require_update_fields("", None)


def test_is_checked_follows_checkbox_values() -> None:
    assert is_checked("on")
    assert is_checked("TRUE")
    assert is_checked("1")
    assert not is_checked(None)
    assert not is_checked("")
    assert not is_checked("off")


def test_parse_item_id_ignores_out_of_range_values() -> None:
    assert parse_item_id("2147483647") == 2147483647
    assert parse_item_id("99999999999999999999") is None
    assert parse_item_id(2**40) is None
