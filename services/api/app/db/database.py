from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

_ENGINE: Engine | None = None
_ENGINE_URL: str | None = None
_SESSIONMAKER: sessionmaker | None = None

# Local-only default. Deployments set DATABASE_URL.
DEFAULT_DB_URL = "sqlite+pysqlite:///.local/formvoice.db"


def database_url() -> str:
    return os.getenv("DATABASE_URL", DEFAULT_DB_URL)


def get_engine() -> Engine:
    """Return the engine for the current DATABASE_URL.

    The engine is rebuilt when DATABASE_URL changes, so tests can point each run at a
    fresh SQLite file.
    """

    global _ENGINE, _ENGINE_URL, _SESSIONMAKER

    url = database_url()
    if _ENGINE is not None and _ENGINE_URL == url:
        return _ENGINE

    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        _ensure_sqlite_parent(url)

    _ENGINE = create_engine(
        url,
        connect_args={"check_same_thread": False} if is_sqlite else {},
    )
    _ENGINE_URL = url
    _SESSIONMAKER = sessionmaker(bind=_ENGINE, class_=Session, autoflush=False)
    return _ENGINE


def db_session() -> Session:
    get_engine()
    assert _SESSIONMAKER is not None
    return _SESSIONMAKER()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding a session closed after the request."""
    db = db_session()
    try:
        yield db
    finally:
        db.close()


def _ensure_sqlite_parent(url: str) -> None:
    _, _, path = url.partition(":///")
    if path and path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)
