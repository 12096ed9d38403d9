"""
Pipeline exceptions.
"""
from typing import Optional

from mythdetector.providers.exceptions import RemoteServiceError, RemoteServiceErrorKind
from .enums import PipelineStage


class NoObjectIdentifiedError(Exception):
    """The tagging service answered, but with zero labels."""

    def __init__(self, message: str = "No object identified in the image."):
        self.message = message
        super().__init__(message)


_TAGGING_CODES = {
    RemoteServiceErrorKind.TRANSPORT: "TAGGING_TRANSPORT",
    RemoteServiceErrorKind.STATUS: "TAGGING_STATUS",
    RemoteServiceErrorKind.PARSE: "TAGGING_PARSE",
    RemoteServiceErrorKind.MISCONFIGURED: "TAGGING_MISCONFIGURED",
}


class PipelineError(Exception):
    """
    Fatal discovery pipeline failure.

    Wraps the underlying cause with the stage that produced it. code and
    user_message let callers tell "could not identify object" apart from
    a network or provider problem.
    """

    def __init__(self, stage: PipelineStage, cause: Exception):
        self.stage = stage
        self.cause = cause
        super().__init__(f"[{stage.value}] {self.user_message}")

    @property
    def code(self) -> str:
        if isinstance(self.cause, NoObjectIdentifiedError):
            return "NO_OBJECT_IDENTIFIED"
        if isinstance(self.cause, RemoteServiceError):
            return _TAGGING_CODES.get(self.cause.kind, "TAGGING_FAILED")
        return f"{self.stage.value.upper()}_FAILED"

    @property
    def remote_kind(self) -> Optional[RemoteServiceErrorKind]:
        if isinstance(self.cause, RemoteServiceError):
            return self.cause.kind
        return None

    @property
    def user_message(self) -> str:
        cause = self.cause
        if isinstance(cause, NoObjectIdentifiedError):
            return cause.message
        if isinstance(cause, RemoteServiceError):
            if cause.kind is RemoteServiceErrorKind.TRANSPORT:
                return "Network error: the image tagging service could not be reached."
            if cause.kind is RemoteServiceErrorKind.MISCONFIGURED:
                return "Image tagging is not configured. Set IMAGGA_API_KEY and IMAGGA_API_SECRET."
            if cause.kind is RemoteServiceErrorKind.STATUS:
                return f"Error: {cause.provider_message or f'tagging service returned HTTP {cause.status_code}'}"
            return "Error: the image tagging service returned an unreadable response."
        return f"Error: {cause}"
