"""
Per-identity holder of the current discovery.

A new upload supersedes any analyze() still in flight for the same
identity: begin() issues a request token, and commit() only stores the
result if that token is still the newest one.
"""
import itertools
import logging
from threading import Lock
from typing import Dict, Optional

from mythdetector.models import DiscoveryRecord

logger = logging.getLogger(__name__)


class DiscoverySlots:
    """Thread-safe map of identity -> latest DiscoveryRecord."""

    def __init__(self):
        self._records: Dict[str, DiscoveryRecord] = {}
        self._tokens: Dict[str, int] = {}
        self._counter = itertools.count(1)
        self._lock = Lock()

    def begin(self, identity: str) -> int:
        """Start a new request for identity and discard its current record."""
        with self._lock:
            token = next(self._counter)
            self._tokens[identity] = token
            self._records.pop(identity, None)
            return token

    def commit(self, identity: str, token: int, record: DiscoveryRecord) -> bool:
        """Store record if token is still current. Returns False for stale results."""
        with self._lock:
            if self._tokens.get(identity) != token:
                logger.info(f"Discarding stale discovery '{record.subject_label}' for {identity}")
                return False
            self._records[identity] = record
            return True

    def get(self, identity: str) -> Optional[DiscoveryRecord]:
        with self._lock:
            return self._records.get(identity)

    def replace(self, identity: str, expected: DiscoveryRecord, record: DiscoveryRecord) -> bool:
        """Swap in an updated record unless a newer upload replaced expected meanwhile."""
        with self._lock:
            if self._records.get(identity) is not expected:
                return False
            self._records[identity] = record
            return True

    def clear(self, identity: str) -> None:
        with self._lock:
            self._records.pop(identity, None)
            self._tokens.pop(identity, None)
