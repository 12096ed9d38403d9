"""
SQLite User Repository.
"""
import logging
import sqlite3
from datetime import datetime
from typing import Optional

from mythdetector.auth.models import User
from mythdetector.auth.repository import BaseUserRepository
from .database import get_connection, transaction

logger = logging.getLogger(__name__)


class SQLiteUserRepository(BaseUserRepository):
    """
    SQLite-backed user repository.
    Implements same interface as InMemoryUserRepository.
    """

    def get(self, email: str) -> Optional[User]:
        """Get user by email."""
        conn = get_connection()
        cursor = conn.execute(
            "SELECT * FROM users WHERE email = ?",
            (email,)
        )
        row = cursor.fetchone()

        if not row:
            return None

        return self._row_to_user(row)

    def add(self, user: User) -> bool:
        """Insert new user; the primary key rejects duplicates."""
        try:
            with transaction() as conn:
                conn.execute(
                    "INSERT INTO users (email, password_hash, registered_at) VALUES (?, ?, ?)",
                    (user.email, user.password_hash, user.registered_at.isoformat())
                )
        except sqlite3.IntegrityError:
            return False

        logger.info(f"Registered user: {user.email}")
        return True

    def _row_to_user(self, row) -> User:
        """Convert database row to User model."""
        return User(
            email=row["email"],
            password_hash=row["password_hash"],
            registered_at=datetime.fromisoformat(row["registered_at"]),
        )
