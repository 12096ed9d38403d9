"""
Provider exceptions.
"""
from enum import Enum
from typing import Optional


class ProviderError(Exception):
    """Base exception for provider errors."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        self.message = message
        super().__init__(f"[{provider}] {message}")


class RemoteServiceErrorKind(str, Enum):
    TRANSPORT = "transport"
    STATUS = "status"
    PARSE = "parse"
    MISCONFIGURED = "misconfigured"


class RemoteServiceError(ProviderError):
    """Network or HTTP layer failure talking to a remote API."""

    def __init__(
        self,
        provider: str,
        kind: RemoteServiceErrorKind,
        message: str,
        status_code: Optional[int] = None,
        provider_message: Optional[str] = None,
    ):
        super().__init__(provider, message)
        self.kind = kind
        self.status_code = status_code
        self.provider_message = provider_message

    @classmethod
    def transport(cls, provider: str, exc: Exception) -> "RemoteServiceError":
        return cls(provider, RemoteServiceErrorKind.TRANSPORT, f"{type(exc).__name__}: {exc}")

    @classmethod
    def status(cls, provider: str, status_code: int, provider_message: Optional[str] = None) -> "RemoteServiceError":
        message = f"HTTP {status_code}"
        if provider_message:
            message = f"{message}: {provider_message}"
        return cls(
            provider,
            RemoteServiceErrorKind.STATUS,
            message,
            status_code=status_code,
            provider_message=provider_message,
        )

    @classmethod
    def parse(cls, provider: str, detail: str) -> "RemoteServiceError":
        return cls(provider, RemoteServiceErrorKind.PARSE, f"Malformed response: {detail}")

    @classmethod
    def misconfigured(cls, provider: str, missing: str) -> "RemoteServiceError":
        return cls(provider, RemoteServiceErrorKind.MISCONFIGURED, f"Missing {missing}")


class GenerationErrorKind(str, Enum):
    MISCONFIGURED = "misconfigured"
    PROVIDER = "provider"


class GenerationError(ProviderError):
    """Narrative generation failed."""

    def __init__(self, provider: str, kind: GenerationErrorKind, message: str):
        super().__init__(provider, message)
        self.kind = kind

    @property
    def is_misconfigured(self) -> bool:
        return self.kind is GenerationErrorKind.MISCONFIGURED
