"""
Authentication dependencies for FastAPI.
"""
import logging

from fastapi import Request, HTTPException, status

from .models import SessionContext

logger = logging.getLogger(__name__)


async def require_session(request: Request) -> SessionContext:
    """
    Dependency that requires a logged-in session.
    Raises 401 if the middleware did not resolve one.
    """
    session = getattr(request.state, "session", None)

    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": "Authentication required",
                "code": "AUTH_REQUIRED",
                "message": "Log in to continue",
            },
        )

    return session
