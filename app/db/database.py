from functools import lru_cache
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.core.config import get_settings
from app.core.logging import get_logger
from app.db.tables import metadata

logger = get_logger("db")


def create_db_engine(url: str) -> Engine:
    """
    Build the engine for a database URL.

    SQLite (tests, local runs) shares one connection across threads so an
    in-memory database survives between requests. Server databases get a pool:
    pool_size connections kept ready, max_overflow extra under load.
    """
    settings = get_settings()
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=settings.debug,
        )
    return create_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug  # Log SQL queries in debug mode
    )


@lru_cache()
def get_engine() -> Engine:
    return create_db_engine(get_settings().sqlalchemy_url)


@lru_cache()
def get_session_factory() -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def get_db() -> Iterator[Session]:
    """
    Dependency for FastAPI route injection.
    Handlers commit their own writes; anything left uncommitted is rolled back on close.
    Usage:
        @router.get("/users")
        def list_users(db: Session = Depends(get_db)):
            ...
    """
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_session() -> Iterator[Session]:
    """
    Context manager for database sessions outside a request.
    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM users"))
    """
    session = get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def fetch_all(db: Session, sql: str, params: dict = None) -> list:
    """Execute raw SQL and return results as list of dicts."""
    rows = db.execute(text(sql), params or {}).mappings().all()
    return [dict(row) for row in rows]


def fetch_one(db: Session, sql: str, params: dict = None) -> Optional[dict]:
    """Execute raw SQL and return the first row as a dict, or None."""
    row = db.execute(text(sql), params or {}).mappings().first()
    return dict(row) if row is not None else None


def init_db(engine: Engine = None) -> None:
    """Create any missing tables."""
    engine = engine or get_engine()
    metadata.create_all(bind=engine)
    logger.info("Database schema ready on %s", engine.url.render_as_string(hide_password=True))


def test_database_connection() -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            return db.execute(text("SELECT 1 as test")).scalar() == 1
    except SQLAlchemyError as e:
        logger.warning("Database connection failed: %s", e)
        return False
