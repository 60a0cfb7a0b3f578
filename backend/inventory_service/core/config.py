from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./inventory.db"
DEFAULT_PHOTO_MAX_BYTES = 10 * 1024 * 1024


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = Field(DEFAULT_DATABASE_URL, alias="DATABASE_URL")

    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(3000, alias="PORT", ge=1, le=65535)

    # --- Photo store ---
    photo_dir: Path = Field(Path("./cache"), alias="PHOTO_DIR")
    photo_max_bytes: int = Field(DEFAULT_PHOTO_MAX_BYTES, alias="PHOTO_MAX_BYTES", gt=0)

    cors_origins: str | None = Field(None, alias="CORS_ORIGINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    seed_sample_items: bool = Field(False, alias="SEED_SAMPLE_ITEMS")
    # Disable when the schema is managed by `alembic upgrade head`.
    create_schema_on_startup: bool = Field(True, alias="CREATE_SCHEMA_ON_STARTUP")

    @field_validator("photo_dir", mode="before")
    @classmethod
    def _normalize_photo_dir(cls, v: object) -> object:
        if isinstance(v, str):
            path = v.strip()
            return Path(path).expanduser() if path else Path("./cache")
        if isinstance(v, Path):
            return v.expanduser()
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _normalize_cors_origins(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip() or None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return v

    @property
    def cors_origin_list(self) -> list[str]:
        if not self.cors_origins:
            return []
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
