"""
Providers Layer.

Thin async clients for the remote services used by the discovery pipeline
and the myth library:
- Tagging (Imagga)
- Encyclopedia (Wikipedia)
- Narrative generation (Gemini)
- Reference directory (local table + API Ninjas)

Each client owns its timeout and normalizes failures into the exceptions
defined in providers.exceptions.
"""
from .exceptions import (
    ProviderError,
    RemoteServiceError,
    RemoteServiceErrorKind,
    GenerationError,
    GenerationErrorKind,
)
from .base import (
    Tag,
    HTTPProvider,
    BaseTaggingProvider,
    BaseEncyclopediaProvider,
    BaseNarrativeProvider,
)
from .tagging import ImaggaTaggingClient
from .encyclopedia import WikipediaClient
from .narrative import GeminiNarrativeClient, build_prompt
from .directory import ReferenceDirectoryClient, parse_search_terms

__all__ = [
    # Exceptions
    "ProviderError",
    "RemoteServiceError",
    "RemoteServiceErrorKind",
    "GenerationError",
    "GenerationErrorKind",

    # Bases
    "Tag",
    "HTTPProvider",
    "BaseTaggingProvider",
    "BaseEncyclopediaProvider",
    "BaseNarrativeProvider",

    # Clients
    "ImaggaTaggingClient",
    "WikipediaClient",
    "GeminiNarrativeClient",
    "build_prompt",
    "ReferenceDirectoryClient",
    "parse_search_terms",
]
