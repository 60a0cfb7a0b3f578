from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import FastAPI, Request


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("inventory_service.requests")


@dataclass(frozen=True)
class RequestRecord:
    method: str
    path: str
    status_code: int
    duration_ms: float


RequestObserver = Callable[[RequestRecord], None]


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a single console handler.

    Calling this again only adjusts the level, so uvicorn reloads and tests do not stack handlers.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if any(getattr(h, "_inventory_service", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._inventory_service = True  # type: ignore[attr-defined]
    root.addHandler(handler)


def log_request(record: RequestRecord) -> None:
    logger.info(
        "%s %s -> %s (%.1f ms)",
        record.method,
        record.path,
        record.status_code,
        record.duration_ms,
    )


def add_request_observer(app: FastAPI, observer: RequestObserver) -> None:
    app.state.request_observers.append(observer)


def install_request_observers(app: FastAPI) -> None:
    app.state.request_observers = [log_request]

    @app.middleware("http")
    async def observe_request(request: Request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            record = RequestRecord(
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=(time.perf_counter() - started) * 1000,
            )
            for observer in request.app.state.request_observers:
                try:
                    observer(record)
                except Exception:
                    logger.exception("Request observer %r failed", observer)
