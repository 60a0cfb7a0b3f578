from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.api.deps import get_photo_store, get_session, has_upload, read_photo_upload
from inventory_service.core.errors import error_responses
from inventory_service.schemas.inventory import RegisterOut
from inventory_service.services.inventory import create_item
from inventory_service.services.photos import PhotoStore
from inventory_service.services.representation import to_response
from inventory_service.services.validation import require_inventory_name


router = APIRouter()


@router.post("", status_code=201, response_model=RegisterOut, responses=error_responses(400, 413))
async def register_item(
    inventory_name: str | None = Form(default=None),
    description: str | None = Form(default=None),
    photo: UploadFile | None = File(default=None),
    session: AsyncSession = Depends(get_session),
    photo_store: PhotoStore = Depends(get_photo_store),
) -> RegisterOut:
    # Validate everything before the photo is written so a rejected request leaves no file behind.
    name = require_inventory_name(inventory_name)
    content = await read_photo_upload(photo, photo_store) if has_upload(photo) else None

    photo_filename = None
    if content is not None:
        photo_filename = photo_store.save(content, Path(photo.filename or "").suffix)
    try:
        item = await create_item(
            session,
            inventory_name=name,
            description=description,
            photo_filename=photo_filename,
        )
    except Exception:
        photo_store.delete(photo_filename)
        raise

    return RegisterOut(message="Device registered successfully", id=item.id, item=to_response(item))
