"""Tests for the admin content-sync HTTP endpoints."""

from __future__ import annotations

import pytest

from eventmarketers.api.routers.content_sync import get_sync_service
from eventmarketers.models import ApprovalStatus, Image, MobileTemplate
from eventmarketers.security import create_access_token

BASE = "/api/content-sync"


class TestAuth:
    def test_missing_token(self, client) -> None:
        response = client.get(f"{BASE}/status")
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Access token is required"}
        assert response.headers["www-authenticate"] == "Bearer"

    def test_invalid_token(self, client) -> None:
        response = client.get(f"{BASE}/status", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid or expired token"

    def test_expired_token(self, client) -> None:
        token = create_access_token({"id": "a", "userType": "ADMIN"}, ttl_minutes=-5)
        response = client.get(f"{BASE}/status", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_customer_is_forbidden(self, client) -> None:
        token = create_access_token({"id": "c1", "userType": "CUSTOMER"})
        response = client.post(f"{BASE}/sync-all", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403
        assert response.json() == {"success": False, "error": "Admin access required"}

    def test_subadmin_is_forbidden(self, client, session, make_image) -> None:
        make_image(id="s1")
        headers = {"Authorization": f"Bearer {create_access_token({'id': 's1', 'userType': 'SUBADMIN'})}"}

        assert client.post(f"{BASE}/sync-image/s1", headers=headers).status_code == 403
        assert client.get(f"{BASE}/status", headers=headers).status_code == 403
        session.expire_all()
        assert session.get(Image, "s1").is_mobile_synced is False


def test_health_needs_no_auth(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_unknown_route_uses_error_envelope(client) -> None:
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}


def test_status(client, auth_headers, make_image) -> None:
    make_image()
    make_image(status=ApprovalStatus.PENDING)

    response = client.get(f"{BASE}/status", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Sync status retrieved successfully"
    assert body["data"]["images"] == {"total": 2, "synced": 0, "pending": 1, "syncPercentage": 0}
    assert body["data"]["mobile"] == {"templates": 0, "videos": 0}


def test_sync_all(client, auth_headers, make_image, make_video) -> None:
    make_image()
    make_video()

    response = client.post(f"{BASE}/sync-all", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["images"]["syncedCount"] == 1
    assert data["videos"]["syncedCount"] == 1
    assert data["total"] == {"synced": 2, "errors": 0, "content": 2}


@pytest.mark.parametrize("path", ["sync-images", "sync-videos"])
def test_per_type_sync_on_empty_catalog(client, auth_headers, path) -> None:
    response = client.post(f"{BASE}/{path}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"] == {"syncedCount": 0, "errorCount": 0, "total": 0, "failed": []}


def test_sync_images_reports_failed_ids(client, auth_headers, session, make_image) -> None:
    make_image(id="ok")
    make_image(id="clash")
    session.add(MobileTemplate(id="tmpl_clash", title="t", image_url="u", file_url="u", category="general"))
    session.commit()

    response = client.post(f"{BASE}/sync-images", headers=auth_headers)

    data = response.json()["data"]
    assert (data["syncedCount"], data["errorCount"], data["total"]) == (1, 1, 2)
    assert [failure["id"] for failure in data["failed"]] == ["clash"]


class _BrokenSyncService:
    def sync_approved_images(self):
        raise RuntimeError("database is gone")


def test_batch_failure_returns_500(client, auth_headers) -> None:
    client.app.dependency_overrides[get_sync_service] = _BrokenSyncService

    response = client.post(f"{BASE}/sync-images", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to sync images"}


class TestSingleRecord:
    def test_sync_image(self, client, auth_headers, session, make_image) -> None:
        make_image(id="abc123", category="BUSINESS", tags=["shop"])

        response = client.post(f"{BASE}/sync-image/abc123", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["alreadySynced"] is False
        assert body["data"]["id"] == "tmpl_abc123"
        assert body["data"]["type"] == "business"
        assert body["data"]["imageUrl"] == body["data"]["fileUrl"]
        session.expire_all()
        assert session.get(Image, "abc123").is_mobile_synced is True

    def test_already_synced_is_a_no_op(self, client, auth_headers, make_image) -> None:
        make_image(id="abc123")
        client.post(f"{BASE}/sync-image/abc123", headers=auth_headers)

        response = client.post(f"{BASE}/sync-image/abc123", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["alreadySynced"] is True
        assert body["message"] == "Image abc123 is already synced"
        assert body["data"]["id"] == "tmpl_abc123"

    def test_not_found(self, client, auth_headers) -> None:
        response = client.post(f"{BASE}/sync-video/nope", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Video with ID nope not found",
            "kind": "NOT_FOUND",
        }

    def test_not_approved(self, client, auth_headers, make_video) -> None:
        make_video(id="v1", status=ApprovalStatus.REJECTED)
        response = client.post(f"{BASE}/sync-video/v1", headers=auth_headers)
        assert response.status_code == 409
        assert response.json()["kind"] == "NOT_APPROVED"

    def test_insert_collision_is_internal(self, client, auth_headers, session, make_image) -> None:
        make_image(id="dup")
        session.add(MobileTemplate(id="tmpl_dup", title="t", image_url="u", file_url="u", category="general"))
        session.commit()

        response = client.post(f"{BASE}/sync-image/dup", headers=auth_headers)

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["kind"] == "INTERNAL"
        assert body["error"].startswith("Failed to sync image dup")

    def test_sync_video(self, client, auth_headers, make_video) -> None:
        make_video(id="v2", duration=15)
        response = client.post(f"{BASE}/sync-video/v2", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == "vid_v2"
        assert data["duration"] == 15
        assert data["likes"] == 0


def test_pending(client, auth_headers, make_image, make_video) -> None:
    make_image(id="i1", title="First")
    make_image(id="i2", status=ApprovalStatus.PENDING)
    make_video(id="v1")

    response = client.get(f"{BASE}/pending", headers=auth_headers)

    data = response.json()["data"]
    assert data["total"] == 2
    assert data["images"][0]["id"] == "i1"
    assert data["images"][0]["title"] == "First"
    assert data["images"][0]["approvalStatus"] == "APPROVED"
    assert data["videos"][0]["id"] == "v1"
