"""Admin-side moderation tables for uploaded images and videos."""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from sqlalchemy import JSON, Boolean, DateTime, Enum as SqlEnum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from eventmarketers.models.base import Base, TimestampMixin


def _new_id() -> str:
    return uuid4().hex


class ApprovalStatus(str, Enum):
    """Moderation status of uploaded content."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ContentCategory(str, Enum):
    BUSINESS = "BUSINESS"
    FESTIVAL = "FESTIVAL"
    GENERAL = "GENERAL"


class _ModeratedContent(TimestampMixin):
    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    url: Mapped[str] = mapped_column(String(1024))
    thumbnail_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    # Plain string so legacy values outside ContentCategory still load.
    category: Mapped[str] = mapped_column(String(50), default=ContentCategory.GENERAL.value)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list)
    downloads: Mapped[int] = mapped_column(Integer, default=0)
    approval_status: Mapped[ApprovalStatus] = mapped_column(
        SqlEnum(ApprovalStatus), default=ApprovalStatus.PENDING, nullable=False, index=True
    )
    is_mobile_synced: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    mobile_sync_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)


class Image(_ModeratedContent, Base):
    """Uploaded image awaiting or past moderation."""

    __tablename__ = "images"

    mobile_template_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("mobile_templates.id"), nullable=True
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Image id={self.id} status={self.approval_status} synced={self.is_mobile_synced}>"


class Video(_ModeratedContent, Base):
    """Uploaded video awaiting or past moderation."""

    __tablename__ = "videos"

    duration: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    mobile_video_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("mobile_videos.id"), nullable=True
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Video id={self.id} status={self.approval_status} synced={self.is_mobile_synced}>"
