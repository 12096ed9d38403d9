"""
SQLite Session Repository.
"""
import logging
from datetime import datetime
from typing import Optional

from mythdetector.auth.models import SessionContext
from mythdetector.auth.repository import BaseSessionRepository
from .database import get_connection

logger = logging.getLogger(__name__)


class SQLiteSessionRepository(BaseSessionRepository):
    """Durable session store."""

    def get(self, token: str) -> Optional[SessionContext]:
        conn = get_connection()
        row = conn.execute(
            "SELECT * FROM sessions WHERE token = ?",
            (token,)
        ).fetchone()

        if not row:
            return None

        return SessionContext(
            token=row["token"],
            identity=row["identity"],
            login_time=datetime.fromisoformat(row["login_time"]),
        )

    def save(self, session: SessionContext) -> SessionContext:
        conn = get_connection()
        conn.execute(
            """
            INSERT OR REPLACE INTO sessions (token, identity, login_time)
            VALUES (?, ?, ?)
            """,
            (session.token, session.identity, session.login_time.isoformat())
        )
        return session

    def delete(self, token: str) -> bool:
        conn = get_connection()
        cursor = conn.execute("DELETE FROM sessions WHERE token = ?", (token,))
        return cursor.rowcount > 0
