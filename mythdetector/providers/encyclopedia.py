"""
Wikipedia encyclopedia provider.

Coverage is expected to be incomplete, so every failure mode here is
reported as an absent summary (None) rather than an error.
"""
import logging
from typing import Optional

import httpx

from .base import BaseEncyclopediaProvider
from .exceptions import RemoteServiceError

logger = logging.getLogger(__name__)


class WikipediaClient(BaseEncyclopediaProvider):
    """MediaWiki extracts API client."""

    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        from mythdetector.config import config
        self.api_url = api_url or config.providers.wikipedia_api_url
        super().__init__(timeout or config.providers.encyclopedia_timeout, client)

    @property
    def name(self) -> str:
        return "wikipedia"

    async def summarize(self, topic: str) -> Optional[str]:
        if not topic or not topic.strip():
            return None

        try:
            return await self._fetch_extract(topic.strip())
        except RemoteServiceError as e:
            logger.warning(f"[WIKIPEDIA] Summary unavailable for '{topic}': {e}")
            return None

    async def _fetch_extract(self, topic: str) -> Optional[str]:
        params = {
            "action": "query",
            "format": "json",
            "prop": "extracts",
            "exintro": 1,
            "explaintext": 1,
            "titles": topic,
        }
        try:
            response = await self.client.get(self.api_url, params=params, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise RemoteServiceError.transport(self.name, e) from e

        if not response.is_success:
            raise RemoteServiceError.status(self.name, response.status_code)

        try:
            pages = response.json()["query"]["pages"]
        except (ValueError, KeyError, TypeError):
            logger.info(f"[WIKIPEDIA] No page data for '{topic}'")
            return None

        if not isinstance(pages, dict) or not pages:
            return None

        page = next(iter(pages.values()))
        extract = page.get("extract") if isinstance(page, dict) else None
        if not extract or not str(extract).strip():
            logger.info(f"[WIKIPEDIA] No extract for '{topic}'")
            return None
        return str(extract).strip()
