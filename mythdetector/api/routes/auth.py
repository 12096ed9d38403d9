"""
Account endpoints: register, login, logout, profile.
"""
import logging

from fastapi import APIRouter, Depends, Response, status

from mythdetector.auth import (
    AuthService,
    SESSION_COOKIE,
    SessionContext,
    UserResponse,
    get_auth_service,
    require_session,
)
from ..schemas import LoginRequest, RegisterRequest, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _session_response(session: SessionContext, response: Response) -> SessionResponse:
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session.token,
        max_age=60 * 60 * 24 * 30,
        httponly=True,
        samesite="lax",
    )
    return SessionResponse(
        token=session.token,
        email=session.identity,
        display_name=session.display_name,
        login_time=session.login_time,
    )


@router.post("/register", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service),
) -> SessionResponse:
    """Create an account and log in."""
    session = service.register(body.email, body.password, body.confirm_password)
    return _session_response(session, response)


@router.post("/login", response_model=SessionResponse)
async def login(
    body: LoginRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service),
) -> SessionResponse:
    session = service.login(body.email, body.password)
    return _session_response(session, response)


@router.post("/logout")
async def logout(
    response: Response,
    session: SessionContext = Depends(require_session),
    service: AuthService = Depends(get_auth_service),
) -> dict:
    """End the current session and drop its discovery."""
    from ..dependencies import get_discovery_slots

    service.logout(session.token)
    get_discovery_slots().clear(session.identity)
    response.delete_cookie(SESSION_COOKIE)
    return {"status": "logged_out"}


@router.get("/me", response_model=UserResponse)
async def me(
    session: SessionContext = Depends(require_session),
    service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """Profile of the logged-in user."""
    return UserResponse.from_session(session, service.users.get(session.identity))
