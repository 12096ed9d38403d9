"""
Reference directory - myth library lookups.

Resolution is tiered: the curated local table always wins, the API Ninjas
mythology endpoint is only asked on a local miss, and anything the remote
tier cannot answer becomes a synthesized Fallback entry. resolve() never
raises.
"""
import asyncio
import logging
from typing import Iterable, List, Optional

import httpx

from mythdetector.config import is_configured
from mythdetector.knowledge.figures import DEFAULT_CULTURE, find_local, terms_for_culture
from mythdetector.models import Provenance, ReferenceEntry
from .base import HTTPProvider
from .exceptions import RemoteServiceError

logger = logging.getLogger(__name__)


def parse_search_terms(term: str) -> List[str]:
    """Comma separated names, stripped and lowercased, blanks dropped."""
    return [t.strip().lower() for t in (term or "").split(",") if t.strip()]


class ReferenceDirectoryClient(HTTPProvider):
    """Local-first mythological figure directory backed by API Ninjas."""

    ENV_KEY = "API_NINJAS_KEY"

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        from mythdetector.config import config
        providers = config.providers
        self._api_key = api_key if api_key is not None else providers.api_ninjas_key
        self.api_url = api_url or providers.api_ninjas_url
        super().__init__(timeout or providers.directory_timeout, client)

    @property
    def name(self) -> str:
        return "api-ninjas"

    @property
    def is_available(self) -> bool:
        return is_configured(self._api_key)

    async def resolve(self, name: str) -> ReferenceEntry:
        local = find_local(name)
        if local is not None:
            return local

        try:
            remote = await self._fetch_remote(name)
        except RemoteServiceError as e:
            logger.warning(f"[MYTHS] Failed to fetch '{name}': {e}")
            remote = None

        if remote is not None:
            return remote
        return ReferenceEntry.fallback(name)

    async def resolve_all(self, names: Iterable[str]) -> List[ReferenceEntry]:
        """Resolve every name concurrently; output follows input order."""
        return list(await asyncio.gather(*(self.resolve(n) for n in names)))

    async def search(self, term: str = "", culture: str = DEFAULT_CULTURE) -> List[ReferenceEntry]:
        names = parse_search_terms(term) or terms_for_culture(culture)
        logger.info(f"[MYTHS] Resolving {len(names)} names (term={term!r}, culture={culture})")
        return await self.resolve_all(names)

    async def _fetch_remote(self, name: str) -> Optional[ReferenceEntry]:
        if not self.is_available:
            raise RemoteServiceError.misconfigured(self.name, self.ENV_KEY)

        try:
            response = await self.client.get(
                self.api_url,
                params={"name": name},
                headers={"X-Api-Key": self._api_key},
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise RemoteServiceError.transport(self.name, e) from e

        if not response.is_success:
            raise RemoteServiceError.status(self.name, response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteServiceError.parse(self.name, str(e)) from e

        if not isinstance(data, list):
            raise RemoteServiceError.parse(self.name, "expected a JSON array")
        if not data:
            return None

        first = data[0]
        if not isinstance(first, dict):
            raise RemoteServiceError.parse(self.name, "expected an object")

        related = first.get("related_figures")
        if not isinstance(related, (list, tuple)):
            related = ()
        return ReferenceEntry(
            name=first.get("name") or name,
            culture=first.get("culture") or "Unknown",
            description=first.get("description") or "No description available.",
            related_names=tuple(str(r) for r in related),
            provenance=Provenance.REMOTE,
        )
