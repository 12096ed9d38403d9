"""
Pytest configuration and fixtures for MythDetector tests.
"""
import os
import pytest
from typing import Callable, List, Optional

import httpx

# Set test environment before importing mythdetector modules
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["IMAGGA_API_KEY"] = "test-imagga-key"
os.environ["IMAGGA_API_SECRET"] = "test-imagga-secret"
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["API_NINJAS_KEY"] = "test-ninjas-key"
os.environ["DEBUG"] = "true"

from mythdetector.providers import (  # noqa: E402
    BaseEncyclopediaProvider,
    BaseNarrativeProvider,
    BaseTaggingProvider,
    Tag,
)

SMALL_PNG = (
    b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01'
    b'\x00\x00\x00\x01\x08\x02\x00\x00\x00\x90wS\xde\x00\x00'
    b'\x00\x0cIDATx\x9cc\xf8\x0f\x00\x00\x01\x01\x00\x05\x18'
    b'\xd8N\x00\x00\x00\x00IEND\xaeB`\x82'
)


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class StubTagger(BaseTaggingProvider):
    """Tagging provider returning canned tags or raising a canned error."""

    def __init__(self, tags: Optional[List[Tag]] = None, error: Optional[Exception] = None):
        super().__init__(timeout=1.0)
        self.tags = tags if tags is not None else [Tag("owl", 97.5), Tag("bird", 80.1)]
        self.error = error
        self.calls = []

    @property
    def name(self) -> str:
        return "stub-tagger"

    @property
    def is_available(self) -> bool:
        return True

    async def identify(self, image, max_labels=5, content_type="image/jpeg"):
        self.calls.append((image, max_labels, content_type))
        if self.error is not None:
            raise self.error
        return list(self.tags)


class StubEncyclopedia(BaseEncyclopediaProvider):
    def __init__(self, summaries: Optional[dict] = None, error: Optional[Exception] = None):
        super().__init__(timeout=1.0)
        self.summaries = summaries if summaries is not None else {"owl": "Owls are birds of prey."}
        self.error = error
        self.calls = []

    @property
    def name(self) -> str:
        return "stub-encyclopedia"

    async def summarize(self, topic):
        self.calls.append(topic)
        if self.error is not None:
            raise self.error
        return self.summaries.get(topic)


class StubNarrator(BaseNarrativeProvider):
    def __init__(self, story: str = "Once, the owl stole the moon.", error: Optional[Exception] = None):
        super().__init__(timeout=1.0)
        self.story = story
        self.error = error
        self.calls = []

    @property
    def name(self) -> str:
        return "stub-narrator"

    @property
    def is_available(self) -> bool:
        return True

    async def weave(self, subject, twist):
        if not subject.strip() or not twist.strip():
            raise ValueError("subject and twist must not be empty")
        self.calls.append((subject, twist))
        if self.error is not None:
            raise self.error
        return self.story


@pytest.fixture
def png_bytes():
    return SMALL_PNG


@pytest.fixture
def stub_tagger():
    return StubTagger()


@pytest.fixture
def stub_encyclopedia():
    return StubEncyclopedia()


@pytest.fixture
def stub_narrator():
    return StubNarrator()


@pytest.fixture
def history_repo():
    from mythdetector.orchestration import InMemoryHistoryRepository
    return InMemoryHistoryRepository()


@pytest.fixture
def orchestrator(stub_tagger, stub_encyclopedia, stub_narrator, history_repo):
    from mythdetector.orchestration import DiscoveryOrchestrator
    return DiscoveryOrchestrator(
        tagger=stub_tagger,
        encyclopedia=stub_encyclopedia,
        narrator=stub_narrator,
        history_sink=history_repo,
    )


@pytest.fixture(autouse=True)
def reset_singletons():
    """Fresh in-memory stores for every test."""
    from mythdetector.auth import reset_auth_service, reset_repository
    from mythdetector.orchestration import reset_history_repository
    from mythdetector.api import dependencies

    def _reset():
        reset_auth_service()
        reset_repository()
        reset_history_repository()
        dependencies.get_orchestrator.cache_clear()
        dependencies.get_discovery_slots.cache_clear()

    _reset()
    yield
    _reset()


@pytest.fixture
def directory_client():
    """Directory whose remote tier knows only 'kukulkan'."""
    from mythdetector.providers import ReferenceDirectoryClient

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.params.get("name") == "kukulkan":
            return httpx.Response(200, json=[{
                "name": "Kukulkan",
                "culture": "Maya",
                "description": "Feathered serpent deity of the Maya.",
                "related_figures": ["Itzamna"],
            }])
        return httpx.Response(200, json=[])

    return ReferenceDirectoryClient(api_key="test-ninjas-key", client=mock_client(handler))


# FastAPI test client fixture
@pytest.fixture
def test_client(orchestrator, history_repo, directory_client):
    """Create a test client wired to stub providers."""
    from fastapi.testclient import TestClient
    from mythdetector.api.main import create_app
    from mythdetector.api import dependencies

    app = create_app(debug=True)
    app.dependency_overrides[dependencies.get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[dependencies.get_history] = lambda: history_repo
    app.dependency_overrides[dependencies.get_directory_client] = lambda: directory_client
    return TestClient(app)


@pytest.fixture
def auth_headers(test_client):
    """Register a user and return headers carrying their session token."""
    response = test_client.post(
        "/api/auth/register",
        json={"email": "Ada@Example.com", "password": "secret1", "confirm_password": "secret1"},
    )
    assert response.status_code == 201
    return {"X-Session-Token": response.json()["token"]}
