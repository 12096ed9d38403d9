"""
Upload history sinks.

The orchestrator reports every assembled discovery to a HistorySink. It
never depends on the sink succeeding.
"""
import logging
from abc import ABC, abstractmethod
from threading import Lock
from typing import List, Optional

from mythdetector.models import UploadHistoryEntry

logger = logging.getLogger(__name__)


class HistorySink(ABC):
    """Best-effort receiver of upload history."""

    @abstractmethod
    def record(self, label: str, identity: Optional[str], timestamp: str) -> None:
        """Record one successful discovery."""
        pass


class BaseHistoryRepository(HistorySink):
    """History sink that can also be read back."""

    @abstractmethod
    def list_for(self, identity: str) -> List[UploadHistoryEntry]:
        """Entries attributed to identity, oldest first."""
        pass

    @abstractmethod
    def list_all(self) -> List[UploadHistoryEntry]:
        """All entries, oldest first."""
        pass


class InMemoryHistoryRepository(BaseHistoryRepository):
    """
    In-memory upload history.
    Thread-safe, suitable for development/testing.
    """

    def __init__(self):
        self._entries: List[UploadHistoryEntry] = []
        self._lock = Lock()
        logger.info("HistoryRepository initialized (in-memory)")

    def record(self, label: str, identity: Optional[str], timestamp: str) -> None:
        entry = UploadHistoryEntry(
            subject_label=label,
            timestamp=timestamp,
            attributed_identity=identity,
        )
        with self._lock:
            self._entries.append(entry)

    def list_for(self, identity: str) -> List[UploadHistoryEntry]:
        with self._lock:
            return [e for e in self._entries if e.attributed_identity == identity]

    def list_all(self) -> List[UploadHistoryEntry]:
        with self._lock:
            return list(self._entries)


_repository: Optional[BaseHistoryRepository] = None


def get_history_repository() -> BaseHistoryRepository:
    """
    Get or create history repository singleton.
    Backend selected via STORAGE_BACKEND environment variable.
    """
    global _repository

    if _repository is None:
        from mythdetector.persistence import is_sqlite_backend, SQLiteHistoryRepository

        if is_sqlite_backend():
            _repository = SQLiteHistoryRepository()
            logger.info("Using SQLite history repository")
        else:
            _repository = InMemoryHistoryRepository()
            logger.info("Using in-memory history repository")

    return _repository


def reset_history_repository() -> None:
    """Reset repository singleton (for testing)."""
    global _repository
    _repository = None
