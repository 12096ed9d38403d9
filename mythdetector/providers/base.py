"""
Base classes for remote providers.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

import httpx


@dataclass(frozen=True)
class Tag:
    """A single ranked label from the tagging service."""
    label: str
    confidence: float


class HTTPProvider(ABC):
    """Owns an httpx.AsyncClient unless one is injected."""

    def __init__(self, timeout: float, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if provider credentials are configured."""
        pass

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()


class BaseTaggingProvider(HTTPProvider):
    """Abstract image tagging provider."""

    @abstractmethod
    async def identify(
        self,
        image: bytes,
        max_labels: int = 5,
        content_type: str = "image/jpeg",
    ) -> List[Tag]:
        """
        Identify objects in an image.

        Args:
            image: Raw image bytes
            max_labels: Maximum number of labels to request
            content_type: Declared media type of the image

        Returns:
            Tags ranked by the remote service, possibly empty
        """
        pass


class BaseEncyclopediaProvider(HTTPProvider):
    """Abstract encyclopedia summary provider."""

    @property
    def is_available(self) -> bool:
        return True

    @abstractmethod
    async def summarize(self, topic: str) -> Optional[str]:
        """Return a plain-text synopsis, or None when unavailable."""
        pass


class BaseNarrativeProvider(HTTPProvider):
    """Abstract generative text provider."""

    @abstractmethod
    async def weave(self, subject: str, twist: str) -> str:
        """Write a short myth about subject with the given twist."""
        pass
