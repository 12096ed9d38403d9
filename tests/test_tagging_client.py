"""
Tests for the Imagga tagging client.
"""
import httpx
import pytest

from mythdetector.providers import ImaggaTaggingClient, RemoteServiceError, RemoteServiceErrorKind, Tag
from tests.conftest import mock_client


def _tags_body(*pairs):
    return {
        "result": {"tags": [{"confidence": c, "tag": {"en": label}} for label, c in pairs]},
        "status": {"text": "", "type": "success"},
    }


def _client(handler, **kwargs):
    kwargs.setdefault("api_key", "key")
    kwargs.setdefault("api_secret", "secret")
    return ImaggaTaggingClient(client=mock_client(handler), **kwargs)


class TestIdentify:
    """Successful tagging requests."""

    @pytest.mark.asyncio
    async def test_returns_tags_in_service_order(self, png_bytes):
        client = _client(lambda request: httpx.Response(200, json=_tags_body(("owl", 99.1), ("bird", 80.0))))

        tags = await client.identify(png_bytes)

        assert tags == [Tag("owl", 99.1), Tag("bird", 80.0)]

    @pytest.mark.asyncio
    async def test_sends_limit_and_basic_auth(self, png_bytes):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["limit"] = request.url.params.get("limit")
            seen["auth"] = request.headers.get("authorization", "")
            seen["body"] = request.content
            return httpx.Response(200, json=_tags_body(("cat", 50.0)))

        await _client(handler).identify(png_bytes, max_labels=3, content_type="image/png")

        assert seen["limit"] == "3"
        assert seen["auth"].startswith("Basic ")
        assert b'name="image"' in seen["body"]
        assert b"image/png" in seen["body"]

    @pytest.mark.asyncio
    async def test_zero_tags_is_not_an_error(self, png_bytes):
        client = _client(lambda request: httpx.Response(200, json=_tags_body()))

        assert await client.identify(png_bytes) == []

    @pytest.mark.asyncio
    async def test_blank_labels_are_dropped(self, png_bytes):
        client = _client(lambda request: httpx.Response(200, json=_tags_body((" ", 95.0), ("owl ", 50.0), ("", 40.0))))

        assert await client.identify(png_bytes) == [Tag("owl", 50.0)]

    @pytest.mark.asyncio
    async def test_rejects_non_positive_limit(self, png_bytes):
        client = _client(lambda request: httpx.Response(200, json=_tags_body()))

        with pytest.raises(ValueError):
            await client.identify(png_bytes, max_labels=0)


class TestFailures:
    """Failure classification."""

    @pytest.mark.asyncio
    async def test_status_error_carries_provider_message(self, png_bytes):
        client = _client(lambda request: httpx.Response(
            403, json={"status": {"text": "Invalid credentials", "type": "error"}}
        ))

        with pytest.raises(RemoteServiceError) as exc_info:
            await client.identify(png_bytes)

        assert exc_info.value.kind is RemoteServiceErrorKind.STATUS
        assert exc_info.value.status_code == 403
        assert exc_info.value.provider_message == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_connection_failure_is_transport(self, png_bytes):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RemoteServiceError) as exc_info:
            await _client(handler).identify(png_bytes)

        assert exc_info.value.kind is RemoteServiceErrorKind.TRANSPORT

    @pytest.mark.asyncio
    async def test_timeout_is_transport(self, png_bytes):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(RemoteServiceError) as exc_info:
            await _client(handler).identify(png_bytes)

        assert exc_info.value.kind is RemoteServiceErrorKind.TRANSPORT

    @pytest.mark.asyncio
    async def test_malformed_body_is_parse(self, png_bytes):
        client = _client(lambda request: httpx.Response(200, json={"result": {}}))

        with pytest.raises(RemoteServiceError) as exc_info:
            await client.identify(png_bytes)

        assert exc_info.value.kind is RemoteServiceErrorKind.PARSE

    @pytest.mark.asyncio
    async def test_missing_secret_is_misconfigured_without_request(self, png_bytes):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json=_tags_body())

        client = _client(handler, api_secret="")

        with pytest.raises(RemoteServiceError) as exc_info:
            await client.identify(png_bytes)

        assert exc_info.value.kind is RemoteServiceErrorKind.MISCONFIGURED
        assert calls == []
        assert client.is_available is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key,secret", [
        ("PASTE_YOUR_IMAGGA_KEY", "secret"),
        ("key", "PASTE_YOUR_IMAGGA_SECRET"),
    ])
    async def test_placeholder_credentials_are_misconfigured(self, png_bytes, key, secret):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(401, json={"status": {"text": "Invalid credentials", "type": "error"}})

        client = _client(handler, api_key=key, api_secret=secret)

        with pytest.raises(RemoteServiceError) as exc_info:
            await client.identify(png_bytes)

        assert exc_info.value.kind is RemoteServiceErrorKind.MISCONFIGURED
        assert calls == []
        assert client.is_available is False
