"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from eventmarketers.db import build_engine, get_session, init_db
from eventmarketers.main import create_app
from eventmarketers.models import ApprovalStatus, Image, Video
from eventmarketers.security import create_access_token

_BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def engine() -> Iterator[Engine]:
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    with session_factory() as session:
        yield session


@pytest.fixture
def make_image(session: Session):
    """Create and commit an image row; later calls get later timestamps."""

    seq = count(1)

    def _make(
        id: str | None = None,
        status: ApprovalStatus = ApprovalStatus.APPROVED,
        category: str = "BUSINESS",
        synced: bool = False,
        **fields,
    ) -> Image:
        n = next(seq)
        image = Image(
            id=id or f"img{n}",
            title=fields.pop("title", f"Image {n}"),
            url=fields.pop("url", f"https://cdn.example.com/images/{n}.png"),
            category=category,
            approval_status=status,
            is_mobile_synced=synced,
            created_at=_BASE_TIME + timedelta(minutes=n),
            **fields,
        )
        session.add(image)
        session.commit()
        return image

    return _make


@pytest.fixture
def make_video(session: Session):
    seq = count(1)

    def _make(
        id: str | None = None,
        status: ApprovalStatus = ApprovalStatus.APPROVED,
        category: str = "FESTIVAL",
        synced: bool = False,
        **fields,
    ) -> Video:
        n = next(seq)
        video = Video(
            id=id or f"vid{n}",
            title=fields.pop("title", f"Video {n}"),
            url=fields.pop("url", f"https://cdn.example.com/videos/{n}.mp4"),
            category=category,
            approval_status=status,
            is_mobile_synced=synced,
            created_at=_BASE_TIME + timedelta(minutes=n),
            **fields,
        )
        session.add(video)
        session.commit()
        return video

    return _make


@pytest.fixture
def admin_token() -> str:
    return create_access_token({"id": "admin-1", "email": "admin@example.com", "userType": "ADMIN"})


@pytest.fixture
def client(session_factory: sessionmaker[Session]) -> TestClient:
    app = create_app()

    def _override_session():
        with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _override_session
    return TestClient(app)


@pytest.fixture
def auth_headers(admin_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}
