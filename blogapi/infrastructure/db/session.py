# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Database layer helpers and session utilities."""

from __future__ import annotations

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, scoped_session, sessionmaker

from blogapi.shared.config import load_config
from blogapi.shared.logging import logger

_config = load_config()


class Base(DeclarativeBase):
    pass


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def build_engine(url: str | None = None) -> Engine:
    db = _config.database
    url = url or db.url
    connect_args: dict[str, object] = {}
    pool_args: dict[str, object] = {
        "pool_size": db.pool_size,
        "max_overflow": db.max_overflow,
        "pool_timeout": db.pool_timeout,
    }
    if _is_sqlite(url):
        connect_args = {
            "check_same_thread": False,
            "timeout": int(db.pool_timeout),
        }
        if ":memory:" in url or url.rstrip("/") == "sqlite:":
            pool_args = {}

    engine = create_engine(
        url,
        echo=False,
        pool_pre_ping=True,
        connect_args=connect_args,
        **pool_args,
    )

    if _is_sqlite(url):
        event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


def _set_sqlite_pragmas(dbapi_conn, _) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA journal_mode=WAL;")
        cur.execute("PRAGMA synchronous=NORMAL;")
        cur.execute("PRAGMA foreign_keys=ON;")
        cur.execute("PRAGMA busy_timeout=30000;")
    except Exception:
        logger.exception("Failed to apply SQLite PRAGMAs")
    finally:
        cur.close()


ENGINE: Engine = build_engine()


SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


def init_db(engine: Engine | None = None) -> None:
    # Models must be imported so their tables are registered on Base.metadata.
    from blogapi.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine or ENGINE)
    logger.info("Database schema ensured")


def dispose_engine() -> None:
    SessionLocal.remove()
    ENGINE.dispose()
    logger.info("Database engine disposed")
