"""
Authentication service.

Register, log in and log out against injected user and session stores.
The resulting SessionContext is what the rest of the application receives
as the logged-in identity.
"""
import hashlib
import hmac
import logging
import secrets
from typing import Optional

from .exceptions import InvalidCredentialsError, RegistrationError
from .models import SessionContext, User, normalize_email
from .repository import BaseSessionRepository, BaseUserRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
PBKDF2_ITERATIONS = 120_000


def hash_password(password: str, salt: Optional[str] = None) -> str:
    """Return "salt$hexdigest" using PBKDF2-SHA256."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), PBKDF2_ITERATIONS)
    return f"{salt}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    salt, _, _digest = stored.partition("$")
    if not salt:
        return False
    return hmac.compare_digest(hash_password(password, salt), stored)


class AuthService:
    """Credential checks and session lifecycle."""

    def __init__(self, users: BaseUserRepository, sessions: BaseSessionRepository):
        self.users = users
        self.sessions = sessions

    def register(self, email: str, password: str, confirm_password: str) -> SessionContext:
        """
        Register a new user and log them in.

        Raises:
            RegistrationError: empty fields, mismatch, short password or duplicate email
        """
        email = normalize_email(email)
        if not email or not password:
            raise RegistrationError("Please fill in all fields.")
        if password != confirm_password:
            raise RegistrationError("Passwords do not match.")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise RegistrationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")

        user = User(email=email, password_hash=hash_password(password))
        if not self.users.add(user):
            raise RegistrationError("This email is already registered.")

        return self._start_session(email)

    def login(self, email: str, password: str) -> SessionContext:
        email = normalize_email(email)
        user = self.users.get(email) if email else None
        if user is None or not verify_password(password or "", user.password_hash):
            logger.info(f"Failed login for {email or '<empty>'}")
            raise InvalidCredentialsError()
        return self._start_session(email)

    def logout(self, token: str) -> bool:
        removed = self.sessions.delete(token)
        if removed:
            logger.info("Session ended")
        return removed

    def resolve(self, token: Optional[str]) -> Optional[SessionContext]:
        if not token:
            return None
        return self.sessions.get(token)

    def _start_session(self, email: str) -> SessionContext:
        session = SessionContext(token=secrets.token_urlsafe(32), identity=email)
        self.sessions.save(session)
        logger.info(f"Session started for {email}")
        return session


_service: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get or create the AuthService singleton over the configured stores."""
    global _service

    if _service is None:
        from .repository import get_session_repository, get_user_repository
        _service = AuthService(get_user_repository(), get_session_repository())

    return _service


def reset_auth_service() -> None:
    global _service
    _service = None
