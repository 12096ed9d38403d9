"""
Shared dependencies for API routes.
"""
import logging
from functools import lru_cache

from mythdetector.config import config
from mythdetector.orchestration import (
    BaseHistoryRepository,
    DiscoveryOrchestrator,
    DiscoverySlots,
    get_history_repository,
)
from mythdetector.providers import (
    GeminiNarrativeClient,
    ImaggaTaggingClient,
    ReferenceDirectoryClient,
    WikipediaClient,
)

logger = logging.getLogger(__name__)


@lru_cache()
def get_tagging_client() -> ImaggaTaggingClient:
    return ImaggaTaggingClient()


@lru_cache()
def get_encyclopedia_client() -> WikipediaClient:
    return WikipediaClient()


@lru_cache()
def get_narrative_client() -> GeminiNarrativeClient:
    return GeminiNarrativeClient()


@lru_cache()
def get_directory_client() -> ReferenceDirectoryClient:
    return ReferenceDirectoryClient()


def get_history() -> BaseHistoryRepository:
    return get_history_repository()


@lru_cache()
def get_orchestrator() -> DiscoveryOrchestrator:
    """Get cached DiscoveryOrchestrator wired to the configured clients."""
    return DiscoveryOrchestrator(
        tagger=get_tagging_client(),
        encyclopedia=get_encyclopedia_client(),
        narrator=get_narrative_client(),
        history_sink=get_history_repository(),
        max_labels=config.providers.max_labels,
    )


@lru_cache()
def get_discovery_slots() -> DiscoverySlots:
    return DiscoverySlots()


async def close_clients() -> None:
    """Close HTTP clients that were created during the app's lifetime."""
    for getter in (get_tagging_client, get_encyclopedia_client, get_narrative_client, get_directory_client):
        if getter.cache_info().currsize:
            await getter().aclose()
            getter.cache_clear()
    get_orchestrator.cache_clear()
