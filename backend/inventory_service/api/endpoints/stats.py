from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.api.deps import get_session
from inventory_service.schemas.inventory import InventoryStatsOut
from inventory_service.services.inventory import inventory_stats


router = APIRouter()


@router.get("", response_model=InventoryStatsOut)
async def get_stats(session: AsyncSession = Depends(get_session)) -> InventoryStatsOut:
    stats = await inventory_stats(session)
    return InventoryStatsOut(
        total_items=stats.total_items,
        items_with_photos=stats.items_with_photos,
        items_without_photos=stats.items_without_photos,
        available_ids=stats.available_ids,
    )
