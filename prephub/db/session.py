"""Session forge."""

from __future__ import annotations

import logging
import time

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from prephub.core.config import get_settings

settings = get_settings()
logger = logging.getLogger("db.session")


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine with driver-appropriate pool settings."""
    if not url:
        raise RuntimeError("DATABASE_URL not configured")
    if url.startswith("sqlite"):
        # Sessions are handed across FastAPI's threadpool.
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=5,
        pool_recycle=300,
        echo=echo,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


engine = build_engine(settings.get_database_url(), echo=settings.debug)
SessionLocal = build_session_factory(engine)


def get_db():
    t0 = time.perf_counter()
    db = SessionLocal()
    acquire_ms = int((time.perf_counter() - t0) * 1000)
    # Lightweight visibility into pool waits
    if acquire_ms > 50:
        logger.warning("db_acquire_ms=%d", acquire_ms)
    try:
        yield db
    finally:
        db.close()
