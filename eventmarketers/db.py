from __future__ import annotations

from collections.abc import Generator
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from eventmarketers.config import get_settings
from eventmarketers.models.base import Base


def build_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine; SQLite connections are shared across the worker threads."""

    if database_url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args
    return create_engine(database_url, future=True, **kwargs)


@lru_cache
def get_engine() -> Engine:
    return build_engine(get_settings().database_url)


@lru_cache
def get_sessionmaker() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False)


def init_db(engine: Engine | None = None) -> None:
    """Create database tables if they don't exist."""

    Base.metadata.create_all(bind=engine or get_engine())


def get_session() -> Generator[Session, None, None]:
    """FastAPI dependency that yields a DB session."""

    session = get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()
