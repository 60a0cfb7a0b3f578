from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inventory_service.models.base import Base, CreatedAtMixin


class InventoryItem(CreatedAtMixin, Base):
    __tablename__ = "inventory"
    # SQLite reuses the highest rowid after a delete unless AUTOINCREMENT is requested.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    inventory_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    photo_filename: Mapped[str | None] = mapped_column(String(255), nullable=True)
