from inventory_service.models.inventory_item import InventoryItem

__all__ = [
    "InventoryItem",
]
