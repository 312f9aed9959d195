"""Database connection management.

This module contains only utility functions:
- Database connection management
- Database initialization and teardown

All CRUD operations live in repositories.
"""
import sqlite3
import threading
from datetime import datetime

import structlog

from .config import DATABASE_URL, database_path

DATABASE_PATH = database_path(DATABASE_URL)

log = structlog.get_logger()


# =============================================================================
# SQLite3 datetime adapter (Python 3.12 compatibility)
# =============================================================================
def _adapt_datetime(dt: datetime) -> str:
    """Adapt datetime to ISO 8601 string for SQLite."""
    return dt.isoformat()

def _convert_datetime(val: bytes) -> datetime:
    """Convert ISO 8601 string from SQLite to datetime."""
    return datetime.fromisoformat(val.decode())

sqlite3.register_adapter(datetime, _adapt_datetime)
sqlite3.register_converter("DATETIME", _convert_datetime)
sqlite3.register_converter("TIMESTAMP", _convert_datetime)


# =============================================================================
# Database Connection
# =============================================================================
_connection_local = threading.local()


def create_connection() -> sqlite3.Connection:
    """Open a new connection for a single request.

    Callers own the connection and must close it.
    """
    conn = sqlite3.connect(
        DATABASE_PATH,
        detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
        check_same_thread=False
    )
    conn.row_factory = sqlite3.Row
    return conn


def get_db() -> sqlite3.Connection:
    """Get thread-local database connection with row factory."""
    if not hasattr(_connection_local, 'connection') or _connection_local.connection is None:
        _connection_local.connection = create_connection()
    return _connection_local.connection


def close_db() -> None:
    """Close the thread-local connection, if any."""
    conn = getattr(_connection_local, 'connection', None)
    if conn is not None:
        conn.close()
        _connection_local.connection = None


def use_database(url: str) -> None:
    """Point the application at another database file."""
    global DATABASE_PATH
    close_db()
    DATABASE_PATH = database_path(url)


# =============================================================================
# Schema
# =============================================================================
def init_db():
    """Initialize database schema"""
    db = get_db()

    # Blog posts; author is stored flattened into two columns
    db.execute("""
        CREATE TABLE IF NOT EXISTS posts (
            id TEXT PRIMARY KEY,
            author_first_name TEXT NOT NULL,
            author_last_name TEXT NOT NULL,
            title TEXT NOT NULL,
            content TEXT NOT NULL,
            created TIMESTAMP NOT NULL
        )
    """)

    db.execute("CREATE INDEX IF NOT EXISTS idx_posts_created ON posts(created)")

    db.commit()
    log.debug("database_initialized", path=str(DATABASE_PATH))


def tear_down_db():
    """Drop all blog data. Used between test cases."""
    log.info("database_dropped", path=str(DATABASE_PATH))
    db = get_db()
    db.execute("DROP TABLE IF EXISTS posts")
    db.commit()
