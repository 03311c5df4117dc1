from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from space_registry.infra.db.config import database_url, pool_settings

logger = logging.getLogger(__name__)

# Created on first use so importing the package never needs DATABASE_URL
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the process-wide engine.

    Total max connections = pool size + max overflow. Connections are
    pinged before checkout and recycled periodically.
    """
    global _engine
    if _engine is None:
        pool = pool_settings()
        _engine = create_engine(
            database_url(),
            pool_size=pool.size,
            max_overflow=pool.max_overflow,
            pool_pre_ping=True,
            pool_recycle=pool.recycle_seconds,
        )
        logger.info(
            "Database engine created",
            extra={"pool_size": pool.size, "max_overflow": pool.max_overflow},
        )
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _session_factory


@contextmanager
def get_session() -> Iterator[Session]:
    """Unit of work: commit on success, rollback on error, always close."""
    session = get_session_factory()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
