from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from eventmarketers.models.content import ApprovalStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class FailedRecord(CamelModel):
    id: str
    reason: str


class SyncResult(CamelModel):
    synced_count: int = 0
    error_count: int = 0
    total: int = 0
    failed: list[FailedRecord] = Field(default_factory=list)


class SyncTotals(CamelModel):
    synced: int
    errors: int
    content: int


class SyncAllResult(CamelModel):
    images: SyncResult
    videos: SyncResult
    total: SyncTotals


class ContentTypeStatus(CamelModel):
    total: int
    synced: int
    pending: int
    sync_percentage: int


class MobileCounts(CamelModel):
    templates: int
    videos: int


class SyncStatus(CamelModel):
    images: ContentTypeStatus
    videos: ContentTypeStatus
    mobile: MobileCounts


class PendingItem(CamelModel):
    id: str
    title: str
    category: str
    approval_status: ApprovalStatus
    created_at: datetime


class PendingContent(CamelModel):
    images: list[PendingItem]
    videos: list[PendingItem]
    total: int


class MobileTemplateOut(CamelModel):
    id: str
    title: str
    description: Optional[str]
    image_url: str
    file_url: str
    category: str
    language: str
    type: str
    is_premium: bool
    tags: list[str]
    downloads: int
    likes: int
    is_active: bool
    mobile_sync_at: Optional[datetime]


class MobileVideoOut(CamelModel):
    id: str
    title: str
    description: Optional[str]
    video_url: str
    thumbnail_url: Optional[str]
    category: str
    language: str
    duration: Optional[int]
    is_premium: bool
    tags: list[str]
    downloads: int
    likes: int
    is_active: bool
    mobile_sync_at: Optional[datetime]
