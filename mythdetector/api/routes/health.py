"""
Health check endpoints.
"""
from fastapi import APIRouter, status

from mythdetector.models import utcnow
from ..schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Check API health status.",
)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.
    Degraded when the tagging service is not configured, since no
    discovery can succeed without it.
    """
    from mythdetector.config import config

    overall_status = "healthy" if config.providers.has_imagga else "degraded"

    return HealthResponse(
        status=overall_status,
        service="mythdetector-api",
        version="1.0.0",
        timestamp=utcnow(),
    )


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness Probe",
)
async def liveness() -> dict:
    """Liveness probe - always returns OK if app is running."""
    return {"status": "alive"}


@router.get(
    "/health/config",
    status_code=status.HTTP_200_OK,
    summary="Configuration Status",
    description="Check API key configuration status (does not expose actual keys).",
)
async def config_status() -> dict:
    """
    Configuration status endpoint.
    Returns which APIs are configured without exposing sensitive keys.
    """
    from mythdetector.config import config

    status = config.validate()
    providers = status["providers"]

    notes = []
    if not providers["gemini_configured"]:
        notes.append("Set GEMINI_API_KEY to enable story generation")
    if not providers["api_ninjas_configured"]:
        notes.append("Set API_NINJAS_KEY to look up figures beyond the local library")

    return {
        "status": "configured" if all(providers.values()) else "partial",
        "apis": {
            "imagga": "configured" if providers["imagga_configured"] else "missing",
            "gemini": "configured" if providers["gemini_configured"] else "missing",
            "api_ninjas": "configured" if providers["api_ninjas_configured"] else "not_set",
            "wikipedia": "public",
        },
        "capabilities": {
            "image_discovery": providers["imagga_configured"],
            "story_generation": providers["gemini_configured"],
            "myth_library_remote": providers["api_ninjas_configured"],
            "myth_library_local": True,
        },
        "notes": notes,
    }
