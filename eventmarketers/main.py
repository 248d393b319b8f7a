from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.responses import JSONResponse

from eventmarketers import __version__
from eventmarketers.api.routers import content_sync
from eventmarketers.config import get_settings
from eventmarketers.db import init_db
from eventmarketers.errors import ContentSyncError, SyncErrorKind
from eventmarketers.logging import setup_logging
from eventmarketers.workers.jobs import sync_approved_content
from eventmarketers.workers.scheduler import JobScheduler

logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    SyncErrorKind.NOT_FOUND: 404,
    SyncErrorKind.NOT_APPROVED: 409,
    SyncErrorKind.ALREADY_SYNCED: 200,
    SyncErrorKind.INTERNAL: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level)
    init_db()

    scheduler = JobScheduler()
    app.state.scheduler = scheduler
    await scheduler.start()
    if settings.auto_sync_interval_seconds:
        logger.info("Auto sync every %d seconds", settings.auto_sync_interval_seconds)
        scheduler.every(settings.auto_sync_interval_seconds, sync_approved_content)
    try:
        yield
    finally:
        await scheduler.stop()


async def content_sync_error_handler(request: Request, exc: ContentSyncError) -> JSONResponse:
    return JSONResponse(
        status_code=_ERROR_STATUS[exc.kind],
        content={"success": False, "error": exc.message, "kind": exc.kind.value},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def create_app() -> FastAPI:
    app = FastAPI(title="EventMarketers Content API", version=__version__, lifespan=lifespan)
    app.include_router(content_sync.router, prefix="/api/content-sync")
    app.add_exception_handler(ContentSyncError, content_sync_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
