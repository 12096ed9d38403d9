"""
Authentication Middleware.
Single source of truth for auth.
Resolves the session token from header or cookie into a SessionContext.
"""
import logging
from typing import Callable, Set, Optional

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response, JSONResponse

from .service import AuthService, get_auth_service

logger = logging.getLogger(__name__)

SESSION_HEADER = "X-Session-Token"
SESSION_COOKIE = "mythdetector_session"


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Authentication middleware.

    Token lookup priority:
    1. Header (X-Session-Token)
    2. Cookie (mythdetector_session)

    Protected paths answer 401 without a valid session. Everything else
    gets request.state.session set to the session or None.
    """

    EXCLUDED_PATHS: Set[str] = {
        "/",
        "/health",
        "/health/live",
        "/health/config",
        "/docs",
        "/redoc",
        "/openapi.json",
        "/favicon.ico",
        "/api/auth/register",
        "/api/auth/login",
    }

    PROTECTED_PREFIXES: tuple = ("/api/",)

    def __init__(
        self,
        app,
        excluded_paths: Optional[Set[str]] = None,
        require_auth: bool = True,
        service_factory: Callable[[], AuthService] = get_auth_service,
    ):
        super().__init__(app)
        self.excluded_paths = excluded_paths or self.EXCLUDED_PATHS
        self.require_auth = require_auth
        self.service_factory = service_factory

        logger.info(f"AuthMiddleware initialized: require_auth={require_auth}")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Resolve session and enforce auth on protected paths."""
        path = request.url.path

        token = self._extract_token(request)
        session = self.service_factory().resolve(token) if token else None
        request.state.session = session

        if session is None and self.require_auth and self._is_protected_path(path):
            logger.warning(f"Missing auth: {request.method} {path}")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={
                    "error": "Authentication required",
                    "code": "AUTH_REQUIRED",
                    "message": f"Missing or expired {SESSION_HEADER}",
                },
            )

        return await call_next(request)

    def _extract_token(self, request: Request) -> Optional[str]:
        """Extract session token from header or cookie."""
        token = request.headers.get(SESSION_HEADER)
        if token:
            return token

        token = request.cookies.get(SESSION_COOKIE)
        if token:
            return token

        return None

    def _is_protected_path(self, path: str) -> bool:
        if path in self.excluded_paths:
            return False
        return path.startswith(self.PROTECTED_PREFIXES)


__all__ = ["AuthMiddleware", "SESSION_HEADER", "SESSION_COOKIE"]
