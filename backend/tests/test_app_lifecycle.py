from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from inventory_service.core.config import get_settings
from inventory_service.core.observability import RequestRecord, add_request_observer
from inventory_service.main import create_app
from inventory_service.services.inventory import SAMPLE_ITEMS


def test_startup_creates_photo_dir_and_shutdown_disposes_database(storage_env: Path) -> None:
    settings = get_settings()
    assert not settings.photo_dir.exists()
    app = create_app(settings)

    with TestClient(app):
        assert settings.photo_dir.is_dir()
        assert app.state.db.is_connected

    assert not app.state.db.is_connected


def test_seed_sample_items_on_startup(storage_env: Path, monkeypatch) -> None:
    monkeypatch.setenv("SEED_SAMPLE_ITEMS", "true")
    get_settings.cache_clear()

    with TestClient(create_app(get_settings())) as client:
        rows = client.get("/inventory").json()

    assert [r["inventory_name"] for r in rows] == [name for name, _ in SAMPLE_ITEMS]
    assert all(r["photo_url"] is None for r in rows)


def test_request_observers_receive_each_request(client: TestClient) -> None:
    seen: list[RequestRecord] = []
    add_request_observer(client.app, seen.append)

    client.get("/inventory")
    client.get("/inventory/123")

    assert [(r.method, r.path, r.status_code) for r in seen] == [
        ("GET", "/inventory", 200),
        ("GET", "/inventory/123", 404),
    ]
    assert all(r.duration_ms >= 0 for r in seen)


def test_failing_observer_does_not_break_requests(client: TestClient) -> None:
    def _boom(_record: RequestRecord) -> None:
        raise RuntimeError("observer failed")

    add_request_observer(client.app, _boom)

    assert client.get("/healthz").status_code == 200
