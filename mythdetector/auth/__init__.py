"""
Authentication Module.
Toy email/password accounts with server-side session tokens.
"""
from .models import User, SessionContext, UserResponse, normalize_email
from .exceptions import AuthError, RegistrationError, InvalidCredentialsError
from .repository import (
    BaseUserRepository,
    BaseSessionRepository,
    InMemoryUserRepository,
    InMemorySessionRepository,
    get_user_repository,
    get_session_repository,
    reset_repository,
)
from .service import AuthService, get_auth_service, reset_auth_service, hash_password, verify_password
from .middleware import AuthMiddleware, SESSION_HEADER, SESSION_COOKIE
from .dependencies import require_session

__all__ = [
    "User",
    "SessionContext",
    "UserResponse",
    "normalize_email",
    "AuthError",
    "RegistrationError",
    "InvalidCredentialsError",
    "BaseUserRepository",
    "BaseSessionRepository",
    "InMemoryUserRepository",
    "InMemorySessionRepository",
    "get_user_repository",
    "get_session_repository",
    "reset_repository",
    "AuthService",
    "get_auth_service",
    "reset_auth_service",
    "hash_password",
    "verify_password",
    "AuthMiddleware",
    "SESSION_HEADER",
    "SESSION_COOKIE",
    "require_session",
]
