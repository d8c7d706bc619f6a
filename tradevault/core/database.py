"""
Database connection and session management.
"""

from typing import Generator, Optional
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session
from tradevault.core.config import get_settings
from tradevault.core.models import Base
import logging

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Singleton engine & session factory, created once and reused everywhere
# ---------------------------------------------------------------------------
_engine = None
_SessionLocal = None


def get_engine():
    """
    Get the shared database engine (singleton).

    Raises MissingDatabaseURLError when DATABASE_URL is not configured.
    """
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine(
            settings.require_database_url(),
            pool_pre_ping=True,  # Verify connections before using
            echo=False,  # Set to True for SQL debugging
        )
    return _engine


def reset_engine() -> None:
    """Dispose of the shared engine so the next call rebuilds it from settings."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


def create_tables(engine=None):
    """
    Create all search tables if they don't exist.

    Idempotent - safe to call multiple times.
    """
    if engine is None:
        engine = get_engine()

    logger.info("Creating search tables if they don't exist...")
    Base.metadata.create_all(bind=engine)
    logger.info("Search tables ready")


def get_session_factory():
    """Get the shared session factory (singleton)."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, bind=get_engine()
        )
    return _SessionLocal


def get_optional_db() -> Generator[Optional[Session], None, None]:
    """
    Dependency for FastAPI routes to get a database session.

    Yields None when the database path is disabled or DATABASE_URL is not
    set, so callers can fall back to in-memory data.

    Usage:
        @router.get("/endpoint")
        def endpoint(db: Optional[Session] = Depends(get_optional_db)):
            ...
    """
    if not get_settings().database_enabled:
        yield None
        return

    try:
        SessionLocal = get_session_factory()
    except Exception as e:
        logger.warning(f"Database unavailable, search will use fallback data: {e}")
        yield None
        return

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_connection() -> str:
    """Run ``SELECT 1``; returns "connected" or raises."""
    with get_engine().connect() as conn:
        conn.execute(text("SELECT 1"))
    return "connected"
