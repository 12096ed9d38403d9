"""
Tests for the Gemini narrative client.
"""
import json

import httpx
import pytest

from mythdetector.providers import GeminiNarrativeClient, GenerationError, GenerationErrorKind, build_prompt
from tests.conftest import mock_client


def _story_body(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _client(handler, api_key="gem-key"):
    return GeminiNarrativeClient(
        api_key=api_key,
        model="test-model",
        api_url="https://gemini.test/v1beta/models",
        client=mock_client(handler),
    )


class TestWeave:
    """Story generation."""

    @pytest.mark.asyncio
    async def test_returns_first_candidate_text(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["key"] = request.url.params.get("key")
            seen["payload"] = json.loads(request.content)
            return httpx.Response(200, json=_story_body("The owl flew to the moon."))

        story = await _client(handler).weave("owl", "it lives on the moon")

        assert story == "The owl flew to the moon."
        assert seen["path"] == "/v1beta/models/test-model:generateContent"
        assert seen["key"] == "gem-key"
        assert seen["payload"]["contents"][0]["parts"][0]["text"] == build_prompt("owl", "it lives on the moon")

    def test_prompt_mentions_subject_and_twist(self):
        prompt = build_prompt("hammer", "it is made of ice")

        assert "myth of the hammer" in prompt
        assert "twist: it is made of ice" in prompt

    @pytest.mark.asyncio
    async def test_no_candidates_is_empty_story(self):
        client = _client(lambda request: httpx.Response(200, json={"candidates": []}))

        assert await client.weave("owl", "twist") == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("subject,twist", [("owl", "   "), ("", "a twist")])
    async def test_blank_inputs_make_no_request(self, subject, twist):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=_story_body("x"))

        with pytest.raises(ValueError):
            await _client(handler).weave(subject, twist)

        assert calls == []


class TestFailures:
    """GenerationError classification."""

    @pytest.mark.asyncio
    async def test_missing_key_is_misconfigured(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=_story_body("x"))

        with pytest.raises(GenerationError) as exc_info:
            await _client(handler, api_key="").weave("owl", "twist")

        assert exc_info.value.kind is GenerationErrorKind.MISCONFIGURED
        assert exc_info.value.is_misconfigured
        assert calls == []

    @pytest.mark.asyncio
    async def test_placeholder_key_is_misconfigured(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(400, json={"error": {"message": "API key not valid"}})

        client = _client(handler, api_key="PASTE_YOUR_GEMINI_KEY")

        with pytest.raises(GenerationError) as exc_info:
            await client.weave("owl", "twist")

        assert exc_info.value.kind is GenerationErrorKind.MISCONFIGURED
        assert client.is_available is False
        assert calls == []

    @pytest.mark.asyncio
    async def test_provider_error_message_is_surfaced(self):
        client = _client(lambda request: httpx.Response(400, json={"error": {"message": "API key not valid"}}))

        with pytest.raises(GenerationError) as exc_info:
            await client.weave("owl", "twist")

        assert exc_info.value.kind is GenerationErrorKind.PROVIDER
        assert exc_info.value.message == "API key not valid"

    @pytest.mark.asyncio
    async def test_status_without_message_reports_code(self):
        client = _client(lambda request: httpx.Response(503, text="unavailable"))

        with pytest.raises(GenerationError) as exc_info:
            await client.weave("owl", "twist")

        assert exc_info.value.message == "Server error: 503"

    @pytest.mark.asyncio
    async def test_transport_failure_is_provider_error(self):
        def handler(request):
            raise httpx.ConnectError("offline", request=request)

        with pytest.raises(GenerationError) as exc_info:
            await _client(handler).weave("owl", "twist")

        assert exc_info.value.kind is GenerationErrorKind.PROVIDER

    @pytest.mark.asyncio
    async def test_unexpected_shape_is_provider_error(self):
        client = _client(lambda request: httpx.Response(200, json={"candidates": ["not an object"]}))

        with pytest.raises(GenerationError):
            await client.weave("owl", "twist")
