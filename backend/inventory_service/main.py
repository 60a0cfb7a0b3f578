from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_service import __version__
from inventory_service.api.router import api_router
from inventory_service.core.config import Settings, get_settings
from inventory_service.core.db import Database
from inventory_service.core.errors import setup_exception_handlers
from inventory_service.core.observability import configure_logging, install_request_observers
from inventory_service.services.inventory import seed_sample_items
from inventory_service.services.photos import PhotoStore


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Inventory Service API",
        version=__version__,
        description="Register, look up, update and delete inventory items with optional photos.",
    )
    app.state.settings = settings
    app.state.db = Database(settings.database_url)
    app.state.photo_store = PhotoStore(settings.photo_dir, max_bytes=settings.photo_max_bytes)

    origins = settings.cors_origin_list
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    install_request_observers(app)
    setup_exception_handlers(app)

    @app.get("/healthz", include_in_schema=False)
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/healthz/deep", include_in_schema=False)
    async def deep_healthz() -> JSONResponse:
        payload: dict[str, Any] = {
            "status": "ok",
            "checks": {
                "database": "ok",
                "photo_store": "ok",
            },
        }
        try:
            await app.state.db.ping()
        except Exception as exc:
            payload["checks"]["database"] = "error"
            payload["error"] = f"{exc.__class__.__name__}: {exc}"

        if not app.state.photo_store.directory.is_dir():
            payload["checks"]["photo_store"] = "missing"

        healthy = all(v == "ok" for v in payload["checks"].values())
        payload["status"] = "ok" if healthy else "error"
        return JSONResponse(status_code=200 if healthy else 503, content=payload)

    @app.on_event("startup")
    async def startup() -> None:
        app.state.photo_store.ensure_directory()

        db: Database = app.state.db
        await db.connect()
        if settings.create_schema_on_startup:
            await db.create_schema()
        if settings.seed_sample_items:
            async with db.session() as session:
                await seed_sample_items(session)

    @app.on_event("shutdown")
    async def shutdown() -> None:
        await app.state.db.dispose()

    app.include_router(api_router)
    return app


app = create_app()
