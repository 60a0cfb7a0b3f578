from __future__ import annotations

from datetime import datetime, timezone

from inventory_service.models.inventory_item import InventoryItem
from inventory_service.services.representation import photo_url_for, to_response


def _item(**kwargs) -> InventoryItem:
    defaults = {
        "id": 3,
        "inventory_name": "Drill",
        "description": "Cordless",
        "photo_filename": None,
        "created_at": datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    }
    defaults.update(kwargs)
    return InventoryItem(**defaults)


def test_photo_url_only_present_with_photo() -> None:
    assert photo_url_for(_item()) is None
    assert photo_url_for(_item(photo_filename="photo-1-abc.png")) == "/inventory/3/photo"


def test_to_response_hides_photo_filename() -> None:
    out = to_response(_item(photo_filename="photo-1-abc.png"))
    dumped = out.model_dump()

    assert "photo_filename" not in dumped
    assert dumped["photo_url"] == "/inventory/3/photo"
    assert dumped["description"] == "Cordless"
    assert dumped["created_at"] == datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_include_photo_appends_reference_to_description() -> None:
    item = _item(photo_filename="photo-1-abc.png")

    out = to_response(item, include_photo_in_description=True)

    assert out.description == "Cordless [Photo: /inventory/3/photo]"
    # The stored record is never touched.
    assert item.description == "Cordless"


def test_include_photo_without_photo_leaves_description() -> None:
    out = to_response(_item(), include_photo_in_description=True)
    assert out.description == "Cordless"
    assert out.photo_url is None
