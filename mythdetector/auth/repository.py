"""
User and Session Repositories.
Supports both in-memory and SQLite backends.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional, Dict
from threading import Lock

from .models import User, SessionContext

logger = logging.getLogger(__name__)


class BaseUserRepository(ABC):
    """Abstract base class for user repositories."""

    @abstractmethod
    def get(self, email: str) -> Optional[User]:
        """Get user by normalized email."""
        pass

    @abstractmethod
    def add(self, user: User) -> bool:
        """Insert user. Returns False if the email is already registered."""
        pass


class BaseSessionRepository(ABC):
    """Abstract base class for session stores."""

    @abstractmethod
    def get(self, token: str) -> Optional[SessionContext]:
        """Get session by token."""
        pass

    @abstractmethod
    def save(self, session: SessionContext) -> SessionContext:
        """Store session."""
        pass

    @abstractmethod
    def delete(self, token: str) -> bool:
        """Delete session."""
        pass


class InMemoryUserRepository(BaseUserRepository):
    """
    In-memory user repository.
    Thread-safe, suitable for development/testing.
    """

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._lock = Lock()
        logger.info("UserRepository initialized (in-memory)")

    def get(self, email: str) -> Optional[User]:
        with self._lock:
            return self._users.get(email)

    def add(self, user: User) -> bool:
        with self._lock:
            if user.email in self._users:
                return False
            self._users[user.email] = user
            logger.info(f"Registered user: {user.email}")
            return True


class InMemorySessionRepository(BaseSessionRepository):
    """In-memory session store."""

    def __init__(self):
        self._sessions: Dict[str, SessionContext] = {}
        self._lock = Lock()
        logger.info("SessionRepository initialized (in-memory)")

    def get(self, token: str) -> Optional[SessionContext]:
        with self._lock:
            return self._sessions.get(token)

    def save(self, session: SessionContext) -> SessionContext:
        with self._lock:
            self._sessions[session.token] = session
            return session

    def delete(self, token: str) -> bool:
        with self._lock:
            return self._sessions.pop(token, None) is not None


_user_repository: Optional[BaseUserRepository] = None
_session_repository: Optional[BaseSessionRepository] = None


def get_user_repository() -> BaseUserRepository:
    """
    Get or create user repository singleton.
    Backend selected via STORAGE_BACKEND environment variable.
    """
    global _user_repository

    if _user_repository is None:
        from mythdetector.persistence import is_sqlite_backend, SQLiteUserRepository

        if is_sqlite_backend():
            _user_repository = SQLiteUserRepository()
            logger.info("Using SQLite user repository")
        else:
            _user_repository = InMemoryUserRepository()
            logger.info("Using in-memory user repository")

    return _user_repository


def get_session_repository() -> BaseSessionRepository:
    """Get or create session repository singleton."""
    global _session_repository

    if _session_repository is None:
        from mythdetector.persistence import is_sqlite_backend, SQLiteSessionRepository

        if is_sqlite_backend():
            _session_repository = SQLiteSessionRepository()
            logger.info("Using SQLite session repository")
        else:
            _session_repository = InMemorySessionRepository()
            logger.info("Using in-memory session repository")

    return _session_repository


def reset_repository() -> None:
    """Reset repository singletons (for testing)."""
    global _user_repository, _session_repository
    _user_repository = None
    _session_repository = None
