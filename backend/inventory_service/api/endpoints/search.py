from __future__ import annotations

from fastapi import APIRouter, Depends, Form
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.api.deps import get_session
from inventory_service.core.errors import error_responses
from inventory_service.schemas.inventory import InventoryItemOut
from inventory_service.services.inventory import get_item
from inventory_service.services.representation import to_response
from inventory_service.services.validation import is_checked


router = APIRouter()


@router.post("", response_model=InventoryItemOut, responses=error_responses(404))
async def search_item(
    id: str = Form(default=""),
    includePhoto: str | None = Form(default=None),
    session: AsyncSession = Depends(get_session),
) -> InventoryItemOut:
    """Look up one item by ID; with `includePhoto` checked, the photo link is appended to the description."""
    item = await get_item(session, id)
    return to_response(item, include_photo_in_description=is_checked(includePhoto))
