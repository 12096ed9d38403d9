"""
Tests for the Wikipedia client. Every failure degrades to an absent summary.
"""
import httpx
import pytest

from mythdetector.providers import WikipediaClient
from tests.conftest import mock_client


def _client(handler):
    return WikipediaClient(api_url="https://wiki.test/w/api.php", client=mock_client(handler))


@pytest.mark.asyncio
async def test_returns_first_page_extract():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(200, json={
            "query": {"pages": {"123": {"title": "Owl", "extract": "  Owls are birds.  "}}}
        })

    summary = await _client(handler).summarize("owl")

    assert summary == "Owls are birds."
    assert seen["titles"] == "owl"
    assert seen["prop"] == "extracts"
    assert seen["explaintext"] == "1"


@pytest.mark.asyncio
async def test_missing_page_is_absent():
    client = _client(lambda request: httpx.Response(200, json={
        "query": {"pages": {"-1": {"title": "Xyzzy", "missing": ""}}}
    }))

    assert await client.summarize("xyzzy") is None


@pytest.mark.asyncio
async def test_http_error_is_absent():
    client = _client(lambda request: httpx.Response(500, text="boom"))

    assert await client.summarize("owl") is None


@pytest.mark.asyncio
async def test_transport_error_is_absent():
    def handler(request):
        raise httpx.ConnectError("offline", request=request)

    assert await _client(handler).summarize("owl") is None


@pytest.mark.asyncio
async def test_unparseable_body_is_absent():
    client = _client(lambda request: httpx.Response(200, text="<html>not json</html>"))

    assert await client.summarize("owl") is None


@pytest.mark.asyncio
async def test_blank_topic_makes_no_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={})

    assert await _client(handler).summarize("   ") is None
    assert calls == []
