"""
Database configuration and session management.

The Database object owns the SQLAlchemy engine and session factory. It is
constructed once by the application factory, stored on ``app.state`` and
disposed of in the lifespan teardown.
"""

import os
from collections.abc import Generator
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from shared.config.logging import get_logger

logger = get_logger(__name__)


def _calculate_pool_size() -> int:
    """
    Calculate pool size based on CPU cores.
    Formula: (2 * CPU cores) + 1, capped at 20 for reasonable limits.
    """
    cores = os.cpu_count() or 4
    return min(cores * 2 + 1, 20)


def _engine_options(url: str) -> dict:
    """Connection pool options for the given database URL."""
    if url.startswith("sqlite"):
        options: dict = {"connect_args": {"check_same_thread": False}}
        # In-memory databases exist per connection; share a single one
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": _calculate_pool_size(),
        "max_overflow": 10,
        "pool_timeout": 30,  # Wait max 30s for connection from pool
        "pool_recycle": 1800,  # Recycle connections after 30 minutes
        "connect_args": {"connect_timeout": 10},
    }


class Database:
    """
    Engine and session factory for one database.

    Usage:
        database = Database(settings.database_url)
        database.create_all()
        with database.session() as db:
            db.execute(...)
        database.dispose()
    """

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        self.engine: Engine = create_engine(url, echo=echo, **_engine_options(url))
        self.session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
        )

    def create_all(self) -> None:
        """Create tables that do not exist yet."""
        # Import here so every model is registered on Base.metadata
        from inventory_api.models import Base

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created/verified")

    def ping(self) -> None:
        """Round-trip a trivial query. Raises on connection failure."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions outside of FastAPI.

        Usage:
            with database.session() as db:
                db.query(Product).all()
        """
        db = self.session_factory()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        """Release pooled connections."""
        self.engine.dispose()
        logger.info("Database connection pool disposed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency for database sessions.

    Usage:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()

    The session is automatically closed after the request completes.
    """
    database: Database = request.app.state.database
    db = database.session_factory()
    try:
        yield db
    finally:
        db.close()


def safe_commit(db: Session) -> None:
    """
    Commit with automatic rollback on failure.

    Raises the original exception after rolling back.
    """
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
