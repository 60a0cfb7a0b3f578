from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class InventoryItemOut(BaseModel):
    id: int
    inventory_name: str
    description: str
    photo_url: str | None = Field(None, description="Path of the photo endpoint, null when no photo is attached")
    created_at: datetime | None = None


class InventoryItemUpdate(BaseModel):
    inventory_name: str | None = Field(None, max_length=255)
    description: str | None = None


class RegisterOut(BaseModel):
    message: str
    id: int
    item: InventoryItemOut


class InventoryItemUpdateOut(BaseModel):
    message: str
    item: InventoryItemOut


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: str


class InventoryStatsOut(BaseModel):
    total_items: int
    items_with_photos: int
    items_without_photos: int
    available_ids: list[int]
