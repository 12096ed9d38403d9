"""
SQLite Database Connection and Schema Management.
"""
import os
import sqlite3
import logging
from pathlib import Path
from threading import Lock
from typing import Optional
from contextlib import contextmanager

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_PATH = "data/mythdetector.db"

_connection_lock = Lock()
_connection: Optional[sqlite3.Connection] = None


def get_database_path() -> str:
    """Get database path from environment or default."""
    return os.environ.get("DATABASE_PATH", DEFAULT_DATABASE_PATH)


def get_connection() -> sqlite3.Connection:
    """
    Get or create SQLite connection.
    Thread-safe singleton pattern.
    """
    global _connection

    with _connection_lock:
        if _connection is None:
            db_path = get_database_path()

            if db_path != ":memory:":
                Path(db_path).parent.mkdir(parents=True, exist_ok=True)

            _connection = sqlite3.connect(
                db_path,
                check_same_thread=False,
                isolation_level=None,
            )
            _connection.row_factory = sqlite3.Row

            _connection.execute("PRAGMA journal_mode=WAL")
            _connection.execute("PRAGMA foreign_keys=ON")
            _connection.execute("PRAGMA busy_timeout=5000")

            logger.info(f"SQLite connection established: {db_path}")

            init_schema(_connection)

        return _connection


@contextmanager
def transaction():
    """
    Context manager for database transactions.
    Auto-commits on success, rolls back on exception.
    """
    conn = get_connection()

    conn.execute("BEGIN IMMEDIATE")
    try:
        yield conn
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise


def init_schema(conn: sqlite3.Connection) -> None:
    """
    Initialize database schema.
    Creates tables if they don't exist.
    """
    conn.executescript("""
        -- Users table
        CREATE TABLE IF NOT EXISTS users (
            email TEXT PRIMARY KEY,
            password_hash TEXT NOT NULL,
            registered_at TEXT NOT NULL DEFAULT (datetime('now'))
        );

        -- Login sessions
        CREATE TABLE IF NOT EXISTS sessions (
            token TEXT PRIMARY KEY,
            identity TEXT NOT NULL,
            login_time TEXT NOT NULL,
            FOREIGN KEY (identity) REFERENCES users(email)
        );

        -- Upload history (append-only)
        CREATE TABLE IF NOT EXISTS upload_history (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            subject_label TEXT NOT NULL,
            timestamp TEXT NOT NULL,
            identity TEXT
        );

        -- Indexes for performance
        CREATE INDEX IF NOT EXISTS idx_sessions_identity
            ON sessions(identity);
        CREATE INDEX IF NOT EXISTS idx_upload_history_identity
            ON upload_history(identity);
    """)

    logger.info("Database schema initialized")


def close_connection() -> None:
    """Close database connection."""
    global _connection

    with _connection_lock:
        if _connection is not None:
            _connection.close()
            _connection = None
            logger.info("SQLite connection closed")
