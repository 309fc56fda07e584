"""Database connection and session management.

This module handles the database connection using SQLAlchemy.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from config import DATA_DIR, DATABASE_URL
from models.base import Base
# Import models to ensure they are registered with Base.metadata
import models  # noqa: F401

_connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    _connect_args = {"check_same_thread": False}
if DATABASE_URL.startswith("sqlite:///"):
    # File-backed SQLite: ensure data directory exists
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(bind) -> None:
    """Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores ``REFERENCES``/``ON DELETE`` clauses unless the pragma is
    set per connection.
    """
    event.listen(bind, "connect", _set_sqlite_pragma)


engine = create_engine(DATABASE_URL, connect_args=_connect_args)
if DATABASE_URL.startswith("sqlite"):
    enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    """Create all tables that do not exist yet.

    Args:
        bind: Optional engine to use instead of the configured one.
    """
    Base.metadata.create_all(bind=bind or engine)


def get_db():
    """Dependency for getting a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
