"""
Persistence Module.
Provides SQLite-backed storage for users, sessions, and upload history.
"""
import logging

from .database import get_connection, transaction, close_connection, init_schema
from .users_repo import SQLiteUserRepository
from .sessions_repo import SQLiteSessionRepository
from .history_repo import SQLiteHistoryRepository

logger = logging.getLogger(__name__)

STORAGE_BACKEND_SQLITE = "sqlite"
STORAGE_BACKEND_MEMORY = "memory"


def get_storage_backend() -> str:
    """Storage backend as validated by AppConfig (unknown values become sqlite)."""
    from mythdetector.config import config
    return config.storage_backend


def is_sqlite_backend() -> bool:
    """Check if using SQLite backend."""
    return get_storage_backend() == STORAGE_BACKEND_SQLITE


__all__ = [
    "get_connection",
    "transaction",
    "close_connection",
    "init_schema",
    "SQLiteUserRepository",
    "SQLiteSessionRepository",
    "SQLiteHistoryRepository",
    "get_storage_backend",
    "is_sqlite_backend",
    "STORAGE_BACKEND_SQLITE",
    "STORAGE_BACKEND_MEMORY",
]
