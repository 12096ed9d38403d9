"""
SQLite Upload History Repository.
"""
import logging
from typing import Optional, List

from mythdetector.models import UploadHistoryEntry
from mythdetector.orchestration.history import BaseHistoryRepository
from .database import get_connection

logger = logging.getLogger(__name__)


class SQLiteHistoryRepository(BaseHistoryRepository):
    """Append-only upload history."""

    def record(self, label: str, identity: Optional[str], timestamp: str) -> None:
        conn = get_connection()
        conn.execute(
            """
            INSERT INTO upload_history (subject_label, timestamp, identity)
            VALUES (?, ?, ?)
            """,
            (label, timestamp, identity)
        )
        logger.info(f"History entry: label={label}, identity={identity}")

    def list_for(self, identity: str) -> List[UploadHistoryEntry]:
        conn = get_connection()
        cursor = conn.execute(
            "SELECT * FROM upload_history WHERE identity = ? ORDER BY id ASC",
            (identity,)
        )
        return [self._row_to_entry(row) for row in cursor.fetchall()]

    def list_all(self) -> List[UploadHistoryEntry]:
        conn = get_connection()
        cursor = conn.execute("SELECT * FROM upload_history ORDER BY id ASC")
        return [self._row_to_entry(row) for row in cursor.fetchall()]

    def _row_to_entry(self, row) -> UploadHistoryEntry:
        return UploadHistoryEntry(
            subject_label=row["subject_label"],
            timestamp=row["timestamp"],
            attributed_identity=row["identity"],
        )
