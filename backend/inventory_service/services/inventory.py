from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.core.errors import item_not_found
from inventory_service.models.inventory_item import InventoryItem
from inventory_service.services.validation import parse_item_id, require_inventory_name, require_update_fields


logger = logging.getLogger(__name__)

# Rows inserted by `seed_sample_items` into an empty table.
SAMPLE_ITEMS: tuple[tuple[str, str], ...] = (
    ("Dell XPS 15 Laptop", "Powerful laptop for development and design work"),
    ("iPhone 15 Pro", "Flagship smartphone for testing mobile applications"),
    ("Samsung 4K Monitor", "27-inch 4K monitor for professional work"),
)


@dataclass
class InventoryStats:
    total_items: int = 0
    items_with_photos: int = 0
    available_ids: list[int] = field(default_factory=list)

    @property
    def items_without_photos(self) -> int:
        return self.total_items - self.items_with_photos


async def _get_or_raise(session: AsyncSession, item_id: int | str) -> InventoryItem:
    parsed = parse_item_id(item_id)
    item = await session.get(InventoryItem, parsed) if parsed is not None else None
    if item is None:
        raise item_not_found(item_id)
    return item


async def create_item(
    session: AsyncSession,
    *,
    inventory_name: str | None,
    description: str | None = None,
    photo_filename: str | None = None,
) -> InventoryItem:
    item = InventoryItem(
        inventory_name=require_inventory_name(inventory_name),
        description=description or "",
        photo_filename=photo_filename,
    )
    session.add(item)
    await session.commit()
    # created_at is a server default; load it before the row leaves the repository.
    await session.refresh(item)
    logger.info("Registered inventory item %s (%r)", item.id, item.inventory_name)
    return item


async def list_items(session: AsyncSession) -> list[InventoryItem]:
    rows = (await session.execute(select(InventoryItem).order_by(InventoryItem.id.asc()))).scalars().all()
    return list(rows)


async def get_item(session: AsyncSession, item_id: int | str) -> InventoryItem:
    return await _get_or_raise(session, item_id)


async def update_item_fields(
    session: AsyncSession,
    item_id: int | str,
    *,
    inventory_name: str | None = None,
    description: str | None = None,
) -> InventoryItem:
    item = await _get_or_raise(session, item_id)
    changes = require_update_fields(inventory_name, description)

    for k, v in changes.items():
        setattr(item, k, v)
    await session.commit()
    await session.refresh(item)
    logger.info("Updated inventory item %s fields=%s", item.id, sorted(changes))
    return item


async def update_item_photo(session: AsyncSession, item_id: int | str, photo_filename: str) -> InventoryItem:
    item = await _get_or_raise(session, item_id)
    item.photo_filename = photo_filename
    await session.commit()
    await session.refresh(item)
    return item


async def delete_item(session: AsyncSession, item_id: int | str) -> InventoryItem:
    item = await _get_or_raise(session, item_id)
    await session.delete(item)
    await session.commit()
    logger.info("Deleted inventory item %s", item.id)
    return item


async def inventory_stats(session: AsyncSession) -> InventoryStats:
    total, with_photos = (
        await session.execute(
            select(
                func.count(InventoryItem.id),
                func.count(InventoryItem.photo_filename),
            )
        )
    ).one()
    ids = (await session.execute(select(InventoryItem.id).order_by(InventoryItem.id.asc()))).scalars().all()
    return InventoryStats(
        total_items=int(total or 0),
        items_with_photos=int(with_photos or 0),
        available_ids=list(ids),
    )


async def seed_sample_items(session: AsyncSession) -> int:
    existing = await session.scalar(select(func.count(InventoryItem.id)))
    if existing:
        return 0
    for name, description in SAMPLE_ITEMS:
        session.add(InventoryItem(inventory_name=name, description=description))
    await session.commit()
    logger.info("Seeded %s sample inventory items", len(SAMPLE_ITEMS))
    return len(SAMPLE_ITEMS)
