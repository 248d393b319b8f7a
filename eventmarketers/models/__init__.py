from eventmarketers.models.base import Base, TimestampMixin
from eventmarketers.models.content import ApprovalStatus, ContentCategory, Image, Video
from eventmarketers.models.mobile import MobileTemplate, MobileVideo

__all__ = [
    "ApprovalStatus",
    "Base",
    "ContentCategory",
    "Image",
    "MobileTemplate",
    "MobileVideo",
    "TimestampMixin",
    "Video",
]
