"""
API Routes.
"""
from .health import router as health_router
from .auth import router as auth_router
from .discoveries import router as discoveries_router
from .myths import router as myths_router
from .history import router as history_router

__all__ = [
    "health_router",
    "auth_router",
    "discoveries_router",
    "myths_router",
    "history_router",
]
