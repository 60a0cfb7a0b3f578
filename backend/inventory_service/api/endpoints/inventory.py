from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Body, Depends, File, UploadFile
from fastapi.responses import FileResponse
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.api.deps import get_photo_store, get_session, has_upload, read_photo_upload
from inventory_service.core.errors import NotFoundError, ValidationError, error_responses
from inventory_service.schemas.inventory import (
    InventoryItemOut,
    InventoryItemUpdate,
    InventoryItemUpdateOut,
    MessageOut,
)
from inventory_service.services.inventory import (
    delete_item,
    get_item,
    list_items,
    update_item_fields,
    update_item_photo,
)
from inventory_service.services.photos import PhotoStore, mime_type_for
from inventory_service.services.representation import to_response

router = APIRouter()


@router.get("", response_model=list[InventoryItemOut])
async def list_inventory(session: AsyncSession = Depends(get_session)) -> list[InventoryItemOut]:
    items = await list_items(session)
    return [to_response(item) for item in items]


@router.get("/{item_id}", response_model=InventoryItemOut, responses=error_responses(404))
async def get_inventory_item(item_id: str, session: AsyncSession = Depends(get_session)) -> InventoryItemOut:
    item = await get_item(session, item_id)
    return to_response(item)


@router.put("/{item_id}", response_model=InventoryItemUpdateOut, responses=error_responses(400, 404))
async def update_inventory_item(
    item_id: str,
    data: InventoryItemUpdate | None = Body(default=None),
    session: AsyncSession = Depends(get_session),
) -> InventoryItemUpdateOut:
    data = data or InventoryItemUpdate()
    item = await update_item_fields(
        session,
        item_id,
        inventory_name=data.inventory_name,
        description=data.description,
    )
    return InventoryItemUpdateOut(message="Item updated successfully", item=to_response(item))


@router.delete("/{item_id}", response_model=MessageOut, responses=error_responses(404))
async def delete_inventory_item(
    item_id: str,
    session: AsyncSession = Depends(get_session),
    photo_store: PhotoStore = Depends(get_photo_store),
) -> MessageOut:
    item = await delete_item(session, item_id)
    if item.photo_filename:
        # Cleanup failures are logged by the store and do not fail the delete.
        photo_store.delete(item.photo_filename)
    return MessageOut(message="Item deleted successfully")


@router.get(
    "/{item_id}/photo",
    response_class=FileResponse,
    responses={200: {"content": {"image/jpeg": {}}}, **error_responses(404)},
)
async def get_inventory_photo(
    item_id: str,
    session: AsyncSession = Depends(get_session),
    photo_store: PhotoStore = Depends(get_photo_store),
) -> FileResponse:
    try:
        item = await get_item(session, item_id)
    except NotFoundError as e:
        raise NotFoundError("Photo not found") from e
    if not item.photo_filename:
        raise NotFoundError("Photo not found")
    if not photo_store.exists(item.photo_filename):
        raise NotFoundError("Photo file not found")

    path = photo_store.path_for(item.photo_filename)
    # The file can vanish after the exists check when a replace or delete races this request.
    try:
        stat_result = path.stat()
    except FileNotFoundError as e:
        raise NotFoundError("Photo file not found") from e

    return FileResponse(
        path=str(path),
        media_type=mime_type_for(item.photo_filename),
        stat_result=stat_result,
    )


@router.put("/{item_id}/photo", response_model=MessageOut, responses=error_responses(400, 404, 413))
async def replace_inventory_photo(
    item_id: str,
    photo: UploadFile | None = File(default=None),
    session: AsyncSession = Depends(get_session),
    photo_store: PhotoStore = Depends(get_photo_store),
) -> MessageOut:
    item = await get_item(session, item_id)
    if not has_upload(photo):
        raise ValidationError("Photo is required")
    content = await read_photo_upload(photo, photo_store)

    # Old file goes first; a failed cleanup is logged and does not block the replacement.
    if item.photo_filename:
        photo_store.delete(item.photo_filename)

    new_filename = photo_store.save(content, Path(photo.filename or "").suffix)
    try:
        await update_item_photo(session, item.id, new_filename)
    except Exception:
        photo_store.delete(new_filename)
        raise
    return MessageOut(message="Photo updated successfully")
