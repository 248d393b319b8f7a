from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Optional

from sqlalchemy.orm import Session

from eventmarketers.config import get_settings
from eventmarketers.db import get_sessionmaker
from eventmarketers.schemas.sync import SyncAllResult
from eventmarketers.services.content_sync import ContentSyncService

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


def sync_approved_content(session_factory: Optional[SessionFactory] = None) -> SyncAllResult:
    """Run the combined image and video sync in its own session."""

    factory = session_factory or get_sessionmaker()
    language = get_settings().default_mobile_language

    with factory() as session:
        result = ContentSyncService(session, language=language).sync_all_approved_content()
    if result.total.content:
        logger.info(
            "Scheduled sync: %d synced, %d errors of %d",
            result.total.synced,
            result.total.errors,
            result.total.content,
        )
    return result
