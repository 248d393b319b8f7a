"""Tests for the sync command line."""

from __future__ import annotations

import json

import pytest

from eventmarketers import cli
from eventmarketers.models import ApprovalStatus


def _run(capsys, session_factory, *argv: str) -> tuple[int, dict]:
    code = cli.main(list(argv), session_factory=session_factory)
    return code, json.loads(capsys.readouterr().out)


def test_sync_all_then_status(capsys, session_factory, make_image, make_video) -> None:
    make_image()
    make_video(status=ApprovalStatus.PENDING)

    code, payload = _run(capsys, session_factory, "sync-all")
    assert code == 0
    assert payload["data"]["total"] == {"synced": 1, "errors": 0, "content": 1}

    code, payload = _run(capsys, session_factory, "status")
    assert payload["data"]["images"]["syncPercentage"] == 100
    assert payload["data"]["mobile"]["templates"] == 1


def test_sync_image_by_id(capsys, session_factory, make_image) -> None:
    make_image(id="abc123")
    code, payload = _run(capsys, session_factory, "sync-image", "abc123")
    assert code == 0
    assert payload["data"]["id"] == "tmpl_abc123"


def test_sync_error_exit_code(capsys, session_factory) -> None:
    code, payload = _run(capsys, session_factory, "sync-video", "missing")
    assert code == 1
    assert payload == {"success": False, "error": "Video with ID missing not found", "kind": "NOT_FOUND"}


def test_single_sync_requires_id(session_factory) -> None:
    with pytest.raises(SystemExit):
        cli.main(["sync-image"], session_factory=session_factory)
