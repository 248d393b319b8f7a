from __future__ import annotations

import argparse
import json
from collections.abc import Sequence
from typing import Optional

from eventmarketers.config import get_settings
from eventmarketers.db import get_sessionmaker, init_db
from eventmarketers.errors import ContentSyncError
from eventmarketers.logging import setup_logging
from eventmarketers.services.content_sync import ContentSyncService
from eventmarketers.workers.jobs import SessionFactory

COMMANDS = ("status", "pending", "sync-all", "sync-images", "sync-videos", "sync-image", "sync-video")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Publish approved admin content to the mobile catalog")
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument("id", nargs="?", help="Image or video id for sync-image / sync-video")
    return parser


def main(argv: Optional[Sequence[str]] = None, session_factory: Optional[SessionFactory] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command in ("sync-image", "sync-video") and not args.id:
        parser.error(f"{args.command} requires an id")

    settings = get_settings()
    setup_logging(settings.log_level)
    if session_factory is None:
        init_db()
        session_factory = get_sessionmaker()

    with session_factory() as session:
        service = ContentSyncService(session, language=settings.default_mobile_language)
        try:
            if args.command == "status":
                result = service.get_sync_status()
            elif args.command == "pending":
                result = service.list_pending()
            elif args.command == "sync-all":
                result = service.sync_all_approved_content()
            elif args.command == "sync-images":
                result = service.sync_approved_images()
            elif args.command == "sync-videos":
                result = service.sync_approved_videos()
            elif args.command == "sync-image":
                result = service.sync_specific_image(args.id)
            else:
                result = service.sync_specific_video(args.id)
        except ContentSyncError as exc:
            print(json.dumps({"success": False, "error": exc.message, "kind": exc.kind.value}))
            return 1

        if hasattr(result, "model_dump"):
            payload = result.model_dump(mode="json", by_alias=True)
        else:
            payload = {"id": result.id, "title": result.title, "category": result.category}
    print(json.dumps({"success": True, "data": payload}, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
