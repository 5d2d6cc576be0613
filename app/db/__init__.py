"""
Database module - engine, per-request sessions and table definitions.
"""
from app.db.database import get_db, get_db_session, get_engine, init_db, test_database_connection

__all__ = [
    "get_db",
    "get_db_session",
    "get_engine",
    "init_db",
    "test_database_connection",
]
