from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile

from inventory_service.core.errors import ValidationError
from inventory_service.services.photos import PhotoStore


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.db.session() as session:
        yield session


def get_photo_store(request: Request) -> PhotoStore:
    return request.app.state.photo_store


def has_upload(upload: UploadFile | str | None) -> bool:
    # FastAPI hands over the Starlette class, not its fastapi.UploadFile subclass.
    # Browsers submit an empty, nameless file part when the file input is left blank.
    return isinstance(upload, UploadFile) and bool(upload.filename)


async def read_photo_upload(upload: UploadFile, photo_store: PhotoStore) -> bytes:
    """
    Read an uploaded photo, enforcing the image-only and size rules before anything touches the disk.
    """
    photo_store.validate_upload(upload.content_type, upload.size or 0)

    # Read at most one byte past the limit so oversized bodies are rejected without buffering them whole.
    content = await upload.read(photo_store.max_bytes + 1)
    photo_store.validate_upload(upload.content_type, len(content))
    if not content:
        raise ValidationError("Uploaded photo is empty")
    return content
