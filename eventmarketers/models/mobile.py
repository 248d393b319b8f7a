"""Public catalog tables served to the mobile app."""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from eventmarketers.models.base import Base, TimestampMixin


class _MobileContent(TimestampMixin):
    id: Mapped[str] = mapped_column(String(80), primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(50), index=True)
    language: Mapped[str] = mapped_column(String(10), default="en")
    is_premium: Mapped[bool] = mapped_column(Boolean, default=False)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list)
    downloads: Mapped[int] = mapped_column(Integer, default=0)
    likes: Mapped[int] = mapped_column(Integer, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    mobile_sync_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)


class MobileTemplate(_MobileContent, Base):
    __tablename__ = "mobile_templates"

    image_url: Mapped[str] = mapped_column(String(1024))
    file_url: Mapped[str] = mapped_column(String(1024))
    type: Mapped[str] = mapped_column(String(50), default="daily")


class MobileVideo(_MobileContent, Base):
    __tablename__ = "mobile_videos"

    video_url: Mapped[str] = mapped_column(String(1024))
    thumbnail_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    duration: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
