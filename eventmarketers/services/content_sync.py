"""Copy moderation-approved images and videos into the public mobile catalog.

Each source record is synced at most once: the mobile copy gets a
deterministic id (``tmpl_<imageId>`` / ``vid_<videoId>``) and the source row
is flagged ``is_mobile_synced``. The mobile insert and the source update are
committed together, one record per transaction, so a failing record is rolled
back on its own and the rest of the batch carries on.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional, Union

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from eventmarketers.errors import ContentSyncError, SyncErrorKind
from eventmarketers.models.content import ApprovalStatus, Image, Video
from eventmarketers.models.mobile import MobileTemplate, MobileVideo
from eventmarketers.schemas.sync import (
    ContentTypeStatus,
    FailedRecord,
    MobileCounts,
    PendingContent,
    PendingItem,
    SyncAllResult,
    SyncResult,
    SyncStatus,
    SyncTotals,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_CATEGORY_MAP = {
    "BUSINESS": "business",
    "FESTIVAL": "festival",
    "GENERAL": "general",
}

_TEMPLATE_TYPE_MAP = {
    "BUSINESS": "business",
    "FESTIVAL": "festival",
    "GENERAL": "daily",
}


def map_category(category: Optional[str]) -> str:
    return _CATEGORY_MAP.get(category or "", "general")


def map_template_type(category: Optional[str]) -> str:
    return _TEMPLATE_TYPE_MAP.get(category or "", "daily")


def mobile_template_id(image_id: str) -> str:
    return f"tmpl_{image_id}"


def mobile_video_id(video_id: str) -> str:
    return f"vid_{video_id}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _percentage(part: int, whole: int) -> int:
    # Half-up, e.g. 1/8 -> 13.
    if whole <= 0:
        return 0
    return (part * 200 + whole) // (whole * 2)


@dataclass(frozen=True)
class _SyncTarget:
    label: str
    source: type[Union[Image, Video]]
    link_attr: str
    builder: str


_IMAGES = _SyncTarget("image", Image, "mobile_template_id", "build_mobile_template")
_VIDEOS = _SyncTarget("video", Video, "mobile_video_id", "build_mobile_video")


class ContentSyncService:
    """Moves approved moderation records into the mobile tables."""

    def __init__(self, session: Session, language: str = "en", clock: Optional[Clock] = None) -> None:
        self.session = session
        self.language = language
        self._clock = clock or _utcnow

    # -- record builders -------------------------------------------------

    def build_mobile_template(self, image: Image, synced_at: datetime) -> MobileTemplate:
        return MobileTemplate(
            id=mobile_template_id(image.id),
            title=image.title,
            description=image.description,
            image_url=image.url,
            file_url=image.url,
            category=map_category(image.category),
            language=self.language,
            type=map_template_type(image.category),
            is_premium=False,
            tags=list(image.tags or []),
            downloads=image.downloads or 0,
            likes=0,
            is_active=True,
            updated_at=synced_at,
            mobile_sync_at=synced_at,
        )

    def build_mobile_video(self, video: Video, synced_at: datetime) -> MobileVideo:
        return MobileVideo(
            id=mobile_video_id(video.id),
            title=video.title,
            description=video.description,
            video_url=video.url,
            thumbnail_url=video.thumbnail_url,
            category=map_category(video.category),
            language=self.language,
            duration=video.duration,
            is_premium=False,
            tags=list(video.tags or []),
            downloads=video.downloads or 0,
            likes=0,
            is_active=True,
            updated_at=synced_at,
            mobile_sync_at=synced_at,
        )

    def _build(self, target: _SyncTarget, record: Any, synced_at: datetime):
        return getattr(self, target.builder)(record, synced_at)

    # -- per-record sync -------------------------------------------------

    def _sync_record(self, target: _SyncTarget, record: Any):
        """Insert the mobile copy and flag the source, committed as one unit."""

        synced_at = self._clock()
        mobile = self._build(target, record, synced_at)
        try:
            self.session.add(mobile)
            self.session.flush()
            record.is_mobile_synced = True
            record.mobile_sync_at = synced_at
            setattr(record, target.link_attr, mobile.id)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return mobile

    def _pending_query(self, target: _SyncTarget):
        return select(target.source).where(
            target.source.approval_status == ApprovalStatus.APPROVED,
            target.source.is_mobile_synced.is_(False),
        )

    def _sync_batch(self, target: _SyncTarget) -> SyncResult:
        logger.info("Starting %s sync", target.label)
        candidates = self.session.scalars(
            self._pending_query(target).order_by(target.source.created_at)
        ).all()
        # Commits below expire the loaded rows; keep what the loop needs up front.
        work = [(record.id, record.title) for record in candidates]
        logger.info("Found %d approved %ss to sync", len(work), target.label)

        result = SyncResult(total=len(work))
        for record_id, title in work:
            try:
                record = self.session.get(target.source, record_id)
                mobile = self._sync_record(target, record)
            except Exception as exc:
                result.error_count += 1
                result.failed.append(FailedRecord(id=record_id, reason=str(exc) or type(exc).__name__))
                logger.exception("Error syncing %s %s", target.label, record_id)
                continue
            result.synced_count += 1
            logger.info("Synced %s %r -> %s", target.label, title, mobile.id)

        logger.info(
            "%s sync completed: %d synced, %d errors",
            target.label.title(),
            result.synced_count,
            result.error_count,
        )
        return result

    def sync_approved_images(self) -> SyncResult:
        return self._sync_batch(_IMAGES)

    def sync_approved_videos(self) -> SyncResult:
        return self._sync_batch(_VIDEOS)

    def sync_all_approved_content(self) -> SyncAllResult:
        logger.info("Starting full content sync")
        images = self.sync_approved_images()
        videos = self.sync_approved_videos()
        totals = SyncTotals(
            synced=images.synced_count + videos.synced_count,
            errors=images.error_count + videos.error_count,
            content=images.total + videos.total,
        )
        logger.info(
            "Full sync completed: %d synced, %d errors, %d total",
            totals.synced,
            totals.errors,
            totals.content,
        )
        return SyncAllResult(images=images, videos=videos, total=totals)

    def _sync_specific(self, target: _SyncTarget, record_id: str):
        record = self.session.get(target.source, record_id)
        if record is None:
            rejection = ContentSyncError.not_found(target.label, record_id)
        elif record.approval_status != ApprovalStatus.APPROVED:
            rejection = ContentSyncError.not_approved(target.label, record_id)
        elif record.is_mobile_synced:
            rejection = ContentSyncError.already_synced(target.label, record_id)
        else:
            rejection = None
        if rejection is not None:
            logger.warning("Manual %s sync rejected: %s", target.label, rejection.message)
            raise rejection

        try:
            mobile = self._sync_record(target, record)
        except Exception as exc:
            logger.exception("Manual %s sync error for %s", target.label, record_id)
            raise ContentSyncError(
                SyncErrorKind.INTERNAL,
                target.label,
                record_id,
                f"Failed to sync {target.label} {record_id}: {exc}",
            ) from exc
        logger.info("Manually synced %s %s -> %s", target.label, record_id, mobile.id)
        return mobile

    def sync_specific_image(self, image_id: str) -> MobileTemplate:
        return self._sync_specific(_IMAGES, image_id)

    def sync_specific_video(self, video_id: str) -> MobileVideo:
        return self._sync_specific(_VIDEOS, video_id)

    def get_mobile_template_for(self, image_id: str) -> Optional[MobileTemplate]:
        return self.session.get(MobileTemplate, mobile_template_id(image_id))

    def get_mobile_video_for(self, video_id: str) -> Optional[MobileVideo]:
        return self.session.get(MobileVideo, mobile_video_id(video_id))

    # -- reporting -------------------------------------------------------

    def _count(self, model, *criteria) -> int:
        return self.session.scalar(select(func.count()).select_from(model).where(*criteria)) or 0

    def _type_status(self, target: _SyncTarget) -> ContentTypeStatus:
        source = target.source
        total = self._count(source)
        synced = self._count(source, source.is_mobile_synced.is_(True))
        pending = self._count(
            source,
            source.approval_status == ApprovalStatus.APPROVED,
            source.is_mobile_synced.is_(False),
        )
        return ContentTypeStatus(
            total=total,
            synced=synced,
            pending=pending,
            sync_percentage=_percentage(synced, total),
        )

    def get_sync_status(self) -> SyncStatus:
        return SyncStatus(
            images=self._type_status(_IMAGES),
            videos=self._type_status(_VIDEOS),
            mobile=MobileCounts(
                templates=self._count(MobileTemplate),
                videos=self._count(MobileVideo),
            ),
        )

    def list_pending(self) -> PendingContent:
        images = self.session.scalars(
            self._pending_query(_IMAGES).order_by(Image.created_at.desc())
        ).all()
        videos = self.session.scalars(
            self._pending_query(_VIDEOS).order_by(Video.created_at.desc())
        ).all()
        return PendingContent(
            images=[PendingItem.model_validate(image) for image in images],
            videos=[PendingItem.model_validate(video) for video in videos],
            total=len(images) + len(videos),
        )
