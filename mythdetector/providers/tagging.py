"""
Imagga tagging provider.
"""
import logging
from typing import List, Optional

import httpx

from mythdetector.config import is_configured
from .base import BaseTaggingProvider, Tag
from .exceptions import RemoteServiceError

logger = logging.getLogger(__name__)


class ImaggaTaggingClient(BaseTaggingProvider):
    """Imagga /v2/tags API client."""

    ENV_KEY = "IMAGGA_API_KEY"
    ENV_SECRET = "IMAGGA_API_SECRET"

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        from mythdetector.config import config
        providers = config.providers
        self._api_key = api_key if api_key is not None else providers.imagga_api_key
        self._api_secret = api_secret if api_secret is not None else providers.imagga_api_secret
        self.api_url = api_url or providers.imagga_api_url
        super().__init__(timeout or providers.tagging_timeout, client)

    @property
    def name(self) -> str:
        return "imagga"

    @property
    def is_available(self) -> bool:
        return is_configured(self._api_key) and is_configured(self._api_secret)

    async def identify(
        self,
        image: bytes,
        max_labels: int = 5,
        content_type: str = "image/jpeg",
    ) -> List[Tag]:
        if max_labels < 1:
            raise ValueError("max_labels must be at least 1")
        if not is_configured(self._api_key):
            raise RemoteServiceError.misconfigured(self.name, self.ENV_KEY)
        if not is_configured(self._api_secret):
            raise RemoteServiceError.misconfigured(self.name, self.ENV_SECRET)

        logger.info(f"[IMAGGA] Tagging image ({len(image)} bytes, limit={max_labels})")

        try:
            response = await self.client.post(
                self.api_url,
                files={"image": ("upload", image, content_type)},
                params={"limit": max_labels},
                auth=(self._api_key, self._api_secret),
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            logger.error(f"[IMAGGA] Timed out after {self.timeout}s")
            raise RemoteServiceError.transport(self.name, e) from e
        except httpx.HTTPError as e:
            logger.error(f"[IMAGGA] Transport error: {e}")
            raise RemoteServiceError.transport(self.name, e) from e

        if not response.is_success:
            provider_message = self._error_text(response)
            logger.error(f"[IMAGGA] API error {response.status_code}: {provider_message}")
            raise RemoteServiceError.status(self.name, response.status_code, provider_message)

        tags = self._parse_tags(response)
        logger.info(f"[IMAGGA] Received {len(tags)} tags" + (f", top='{tags[0].label}'" if tags else ""))
        return tags

    def _parse_tags(self, response: httpx.Response) -> List[Tag]:
        try:
            data = response.json()
            raw_tags = data["result"]["tags"]
            tags = [
                Tag(label=str(item["tag"]["en"]).strip(), confidence=float(item["confidence"]))
                for item in raw_tags
            ]
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"[IMAGGA] Unparseable response: {response.text[:500]}")
            raise RemoteServiceError.parse(self.name, str(e)) from e

        # Blank labels cannot name a discovery
        return [t for t in tags if t.label]

    @staticmethod
    def _error_text(response: httpx.Response) -> Optional[str]:
        """Imagga reports errors as {"status": {"text": ..., "type": "error"}}."""
        try:
            return response.json().get("status", {}).get("text") or None
        except (ValueError, AttributeError):
            return response.text[:200] or None
