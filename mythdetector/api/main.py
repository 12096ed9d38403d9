"""
FastAPI Application - MythDetector Gateway.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from mythdetector.auth import AuthError, AuthMiddleware
from mythdetector.orchestration import PipelineError
from mythdetector.providers import GenerationError

from .routes import health_router, auth_router, discoveries_router, myths_router, history_router
from .exceptions import (
    APIError,
    api_error_handler,
    auth_error_handler,
    generation_error_handler,
    generic_exception_handler,
    pipeline_error_handler,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan handler."""
    logger.info("=" * 60)
    logger.info("Starting MythDetector API...")
    logger.info("=" * 60)

    from mythdetector.config import config
    config.log_status()

    yield

    from .dependencies import close_clients
    await close_clients()
    logger.info("Shutting down MythDetector API...")


def create_app(
    debug: bool = False,
    require_auth: bool = True,
) -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title="MythDetector API",
        description="Identify objects in photos and link them to mythology and folklore",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
        debug=debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(AuthMiddleware, require_auth=require_auth)

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(PipelineError, pipeline_error_handler)
    app.add_exception_handler(GenerationError, generation_error_handler)
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(discoveries_router)
    app.include_router(myths_router)
    app.include_router(history_router)

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Return a simple SVG favicon to prevent 404 errors."""
        svg_icon = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32">
            <rect width="32" height="32" rx="6" fill="#b45309"/>
            <circle cx="16" cy="16" r="7" fill="white"/>
        </svg>'''
        return Response(content=svg_icon, media_type="image/svg+xml")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "mythdetector.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
