"""
Engine and session factory for the SQL user store.

Sync endpoints run in FastAPI's threadpool, so a pooled SQLite connection can
be checked out by a different thread than the one that opened it; the engine
is built with ``check_same_thread=False`` for SQLite URLs. Each repository
call opens a short-lived session through ``get_session``.
"""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from api.core.config import get_settings

Base = declarative_base()


def _connect_args(url: str) -> dict:
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


@lru_cache
def get_engine() -> Engine:
    url = (get_settings().database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL precisa estar configurada para STORAGE_BACKEND=sql.")
    return create_engine(url, future=True, pool_pre_ping=True, connect_args=_connect_args(url))


@lru_cache
def _get_sessionmaker() -> sessionmaker:
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, future=True)


@contextmanager
def get_session() -> Iterator[Session]:
    session: Session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()
