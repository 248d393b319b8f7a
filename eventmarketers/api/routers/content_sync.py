"""Admin endpoints that publish approved content to the mobile catalog."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from eventmarketers.config import get_settings
from eventmarketers.db import get_session
from eventmarketers.errors import ContentSyncError, SyncErrorKind
from eventmarketers.schemas.sync import MobileTemplateOut, MobileVideoOut
from eventmarketers.security import AdminUser, require_admin
from eventmarketers.services.content_sync import ContentSyncService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["content-sync"], dependencies=[Depends(require_admin)])


def get_sync_service(db: Session = Depends(get_session)) -> ContentSyncService:
    return ContentSyncService(db, language=get_settings().default_mobile_language)


def _ok(message: str, data: Any) -> dict[str, Any]:
    return {"success": True, "message": message, "data": data}


def _dump(model) -> Any:
    return model.model_dump(mode="json", by_alias=True)


def _run_batch(action: Callable[[], Any], failure: str) -> Any:
    try:
        return action()
    except Exception as exc:
        logger.exception(failure)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure) from exc


@router.get("/status")
def get_status(service: ContentSyncService = Depends(get_sync_service)):
    """Sync counts and percentages per content type."""

    result = _run_batch(service.get_sync_status, "Failed to get sync status")
    return _ok("Sync status retrieved successfully", _dump(result))


@router.post("/sync-all")
def sync_all(
    service: ContentSyncService = Depends(get_sync_service),
    user: AdminUser = Depends(require_admin),
):
    logger.info("%s %s triggered full content sync", user.user_type, user.id)
    result = _run_batch(service.sync_all_approved_content, "Failed to sync content")
    return _ok("Content sync completed successfully", _dump(result))


@router.post("/sync-images")
def sync_images(
    service: ContentSyncService = Depends(get_sync_service),
    user: AdminUser = Depends(require_admin),
):
    logger.info("%s %s triggered image sync", user.user_type, user.id)
    result = _run_batch(service.sync_approved_images, "Failed to sync images")
    return _ok("Image sync completed successfully", _dump(result))


@router.post("/sync-videos")
def sync_videos(
    service: ContentSyncService = Depends(get_sync_service),
    user: AdminUser = Depends(require_admin),
):
    logger.info("%s %s triggered video sync", user.user_type, user.id)
    result = _run_batch(service.sync_approved_videos, "Failed to sync videos")
    return _ok("Video sync completed successfully", _dump(result))


@router.post("/sync-image/{image_id}")
def sync_image(image_id: str, service: ContentSyncService = Depends(get_sync_service)):
    """Sync one image; an already-synced image answers with its existing template."""

    try:
        template = service.sync_specific_image(image_id)
    except ContentSyncError as exc:
        if exc.kind != SyncErrorKind.ALREADY_SYNCED:
            raise
        existing = service.get_mobile_template_for(image_id)
        data = _dump(MobileTemplateOut.model_validate(existing)) if existing else None
        return {**_ok(exc.message, data), "alreadySynced": True}
    data = _dump(MobileTemplateOut.model_validate(template))
    return {**_ok("Image synced successfully", data), "alreadySynced": False}


@router.post("/sync-video/{video_id}")
def sync_video(video_id: str, service: ContentSyncService = Depends(get_sync_service)):
    """Sync one video; an already-synced video answers with its existing mobile video."""

    try:
        video = service.sync_specific_video(video_id)
    except ContentSyncError as exc:
        if exc.kind != SyncErrorKind.ALREADY_SYNCED:
            raise
        existing = service.get_mobile_video_for(video_id)
        data = _dump(MobileVideoOut.model_validate(existing)) if existing else None
        return {**_ok(exc.message, data), "alreadySynced": True}
    data = _dump(MobileVideoOut.model_validate(video))
    return {**_ok("Video synced successfully", data), "alreadySynced": False}


@router.get("/pending")
def get_pending(service: ContentSyncService = Depends(get_sync_service)):
    result = _run_batch(service.list_pending, "Failed to get pending content")
    return _ok("Pending content retrieved successfully", _dump(result))
