from __future__ import annotations

from inventory_service.models.inventory_item import InventoryItem
from inventory_service.schemas.inventory import InventoryItemOut


def photo_url_for(item: InventoryItem) -> str | None:
    if not item.photo_filename:
        return None
    return f"/inventory/{item.id}/photo"


def to_response(item: InventoryItem, include_photo_in_description: bool = False) -> InventoryItemOut:
    """
    Build the client-facing shape of a stored item.

    `photo_filename` never leaves the service; clients get the derived `photo_url` instead.
    With `include_photo_in_description`, the photo reference is appended to the description
    of this response only.
    """
    photo_url = photo_url_for(item)
    description = item.description or ""
    if include_photo_in_description and photo_url is not None:
        description = f"{description} [Photo: {photo_url}]"

    return InventoryItemOut(
        id=item.id,
        inventory_name=item.inventory_name,
        description=description,
        photo_url=photo_url,
        created_at=item.created_at,
    )
