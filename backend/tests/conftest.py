from __future__ import annotations

import io
import sys
from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from PIL import Image
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

import inventory_service.models  # noqa: E402,F401
from inventory_service.core.config import get_settings  # noqa: E402
from inventory_service.main import create_app  # noqa: E402
from inventory_service.models.base import Base  # noqa: E402
from inventory_service.services.photos import PhotoStore  # noqa: E402


@pytest.fixture
def storage_env(tmp_path, monkeypatch) -> Path:
    db_path = tmp_path / "test.db"
    photo_dir = tmp_path / "cache"

    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    monkeypatch.setenv("PHOTO_DIR", str(photo_dir))
    monkeypatch.setenv("SEED_SAMPLE_ITEMS", "false")
    monkeypatch.setenv("CREATE_SCHEMA_ON_STARTUP", "true")
    monkeypatch.delenv("PHOTO_MAX_BYTES", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def db_engine(storage_env: Path) -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(get_settings().database_url, future=True)

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def photo_store(tmp_path) -> PhotoStore:
    return PhotoStore(tmp_path / "photos", max_bytes=1024 * 1024)


@pytest.fixture
def client(storage_env: Path) -> Iterator[TestClient]:
    app = create_app(get_settings())
    with TestClient(app) as test_client:
        yield test_client


def _image_bytes(fmt: str = "PNG", *, color: str = "white", size: tuple[int, int] = (8, 8)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def image_bytes():
    return _image_bytes
