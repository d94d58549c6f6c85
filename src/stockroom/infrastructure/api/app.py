"""Stockroom FastAPI application.

Usage:
    stockroom serve --port 8000
"""

from __future__ import annotations

import threading

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from stockroom.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InternalInconsistencyError,
    ValidationError,
)
from stockroom.domain.repository.item_repository import ItemRepository
from stockroom.infrastructure import bootstrap
from stockroom.infrastructure.api.routes import router as inventory_router

logger = structlog.get_logger(__name__)


def create_app(item_repo: ItemRepository | None = None, seed: bool = True) -> FastAPI:
    """Build an app around *item_repo*, or a freshly seeded in-memory store."""
    app = FastAPI(
        title="Stockroom API",
        description="In-memory inventory catalog",
    )
    app.state.item_repo = item_repo if item_repo is not None else bootstrap.item_repository(seed)
    app.state.store_lock = threading.Lock()

    app.add_exception_handler(DomainException, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _malformed_body_handler)

    app.include_router(inventory_router)

    @app.get("/")
    def home() -> dict:
        return {"message": "Stockroom inventory API"}

    @app.get("/health")
    def health(request: Request) -> dict:
        with request.app.state.store_lock:
            count = len(request.app.state.item_repo.list_all())
        return {"status": "ok", "items": count}

    return app


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
_STATUS_BY_ERROR: list[tuple[type[DomainException], int]] = [
    (ValidationError, 400),
    (EntityNotFoundError, 404),
    (InternalInconsistencyError, 500),
]


def _status_for(exc: DomainException) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 500


async def _domain_error_handler(request: Request, exc: DomainException) -> JSONResponse:
    status = _status_for(exc)
    log = logger.error if status >= 500 else logger.warning
    log(
        "Request rejected",
        method=request.method,
        path=request.url.path,
        error=type(exc).__name__,
        detail=str(exc),
    )
    return JSONResponse(
        status_code=status,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


async def _malformed_body_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(
        "Malformed request body",
        method=request.method,
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return JSONResponse(
        status_code=400,
        content={"error": "MalformedRequestBody", "detail": _summarize(exc)},
    )


def _summarize(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts)
