from __future__ import annotations

from enum import Enum


class SyncErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    NOT_APPROVED = "NOT_APPROVED"
    ALREADY_SYNCED = "ALREADY_SYNCED"
    INTERNAL = "INTERNAL"


class ContentSyncError(Exception):
    """Raised when a single-record sync cannot produce a mobile record."""

    def __init__(self, kind: SyncErrorKind, content_type: str, content_id: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.content_type = content_type
        self.content_id = content_id
        self.message = message

    @classmethod
    def not_found(cls, content_type: str, content_id: str) -> "ContentSyncError":
        return cls(
            SyncErrorKind.NOT_FOUND,
            content_type,
            content_id,
            f"{content_type.title()} with ID {content_id} not found",
        )

    @classmethod
    def not_approved(cls, content_type: str, content_id: str) -> "ContentSyncError":
        return cls(
            SyncErrorKind.NOT_APPROVED,
            content_type,
            content_id,
            f"{content_type.title()} {content_id} is not approved for sync",
        )

    @classmethod
    def already_synced(cls, content_type: str, content_id: str) -> "ContentSyncError":
        return cls(
            SyncErrorKind.ALREADY_SYNCED,
            content_type,
            content_id,
            f"{content_type.title()} {content_id} is already synced",
        )
