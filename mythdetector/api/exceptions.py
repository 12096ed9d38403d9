"""
API Exceptions and Error Handlers.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Optional

from mythdetector.auth.exceptions import AuthError
from mythdetector.orchestration.errors import PipelineError
from mythdetector.providers.exceptions import (
    GenerationError,
    GenerationErrorKind,
    RemoteServiceErrorKind,
)


class ErrorResponse(BaseModel):
    """Standard error response format."""
    error: str
    detail: Optional[str] = None
    code: str
    status_code: int


class APIError(Exception):
    """Base API exception."""

    def __init__(
        self,
        message: str,
        code: str = "API_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: Optional[str] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error=self.message,
            detail=self.detail,
            code=self.code,
            status_code=self.status_code,
        )


class ValidationError(APIError):
    """400 - Bad Request / Validation Error."""

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )


class PayloadTooLargeError(APIError):
    """413 - Upload exceeds the configured size."""

    def __init__(self, max_mb: int):
        super().__init__(
            message=f"Image exceeds the {max_mb} MB upload limit",
            code="PAYLOAD_TOO_LARGE",
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        )


class NotFoundError(APIError):
    """404 - Resource Not Found."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource} not found: {resource_id}",
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
        )


class ConflictError(APIError):
    """409 - The resource changed underneath the request."""

    def __init__(self, message: str):
        super().__init__(message=message, code="CONFLICT", status_code=status.HTTP_409_CONFLICT)


_PIPELINE_STATUS = {
    RemoteServiceErrorKind.TRANSPORT: status.HTTP_504_GATEWAY_TIMEOUT,
    RemoteServiceErrorKind.STATUS: status.HTTP_502_BAD_GATEWAY,
    RemoteServiceErrorKind.PARSE: status.HTTP_502_BAD_GATEWAY,
    RemoteServiceErrorKind.MISCONFIGURED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def pipeline_error_to_api(exc: PipelineError) -> APIError:
    """Map a classified pipeline failure onto an HTTP error."""
    kind = exc.remote_kind
    status_code = _PIPELINE_STATUS.get(kind, status.HTTP_422_UNPROCESSABLE_ENTITY)
    return APIError(
        message=exc.user_message,
        code=exc.code,
        status_code=status_code,
        detail=f"stage={exc.stage.value}",
    )


def generation_error_to_api(exc: GenerationError) -> APIError:
    if exc.kind is GenerationErrorKind.MISCONFIGURED:
        return APIError(
            message="Story generation is not configured.",
            code="NARRATIVE_MISCONFIGURED",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Set GEMINI_API_KEY in your .env file and restart the service.",
        )
    return APIError(
        message=f"Error: {exc.message}. Please check your API key and connection.",
        code="NARRATIVE_PROVIDER_ERROR",
        status_code=status.HTTP_502_BAD_GATEWAY,
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
    )


async def pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
    return await api_error_handler(request, pipeline_error_to_api(exc))


async def generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
    return await api_error_handler(request, generation_error_to_api(exc))


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return await api_error_handler(
        request,
        APIError(message=exc.message, code=exc.code, status_code=exc.status_code),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc) if request.app.debug else None,
            "code": "INTERNAL_ERROR",
            "status_code": 500,
        },
    )
