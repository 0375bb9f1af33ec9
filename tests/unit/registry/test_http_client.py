"""Unit tests for HttpRegistryClient using httpx.MockTransport."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from opsml_cli.core.config import AppSettings, RegistrySettings
from opsml_cli.core.exceptions import (
    ConfigurationError,
    DecodeError,
    NetworkError,
    UnexpectedStatusError,
)
from opsml_cli.core.protocols import IRegistryClient
from opsml_cli.registry import HttpRegistryClient, create_registry_client, paths

BASE_URL = "http://opsml.test"


def _client(handler) -> HttpRegistryClient:
    return HttpRegistryClient(BASE_URL, transport=httpx.MockTransport(handler))


async def _collect(client: HttpRegistryClient, path: str, payload: dict) -> list[bytes]:
    async with client:
        return [chunk async for chunk in client.stream_bytes(path, payload)]


async def _post(client: HttpRegistryClient, path: str, payload: dict):
    async with client:
        return await client.post_json(path, payload)


class TestPostJson:
    def test_posts_json_body_to_joined_url(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"cards": []})

        body = asyncio.run(_post(_client(handler), paths.LIST_CARDS, {"table_name": "T"}))

        assert body == {"cards": []}
        assert seen == {
            "method": "POST",
            "url": f"{BASE_URL}/opsml/cards/list",
            "body": {"table_name": "T"},
        }

    def test_non_success_status_raises(self):
        client = _client(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(UnexpectedStatusError) as exc_info:
            asyncio.run(_post(client, paths.MODEL_METADATA, {}))
        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "boom"

    def test_invalid_json_raises_decode_error(self):
        client = _client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(DecodeError):
            asyncio.run(_post(client, paths.MODEL_METADATA, {}))

    def test_transport_failure_raises_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkError):
            asyncio.run(_post(_client(handler), paths.MODEL_METADATA, {}))


class TestStreamBytes:
    def test_yields_body_chunks(self):
        async def body():
            yield b"abc"
            yield b"def"

        client = _client(lambda request: httpx.Response(200, content=body()))
        chunks = asyncio.run(_collect(client, paths.DOWNLOAD_FILE, {"read_path": "x"}))
        assert b"".join(chunks) == b"abcdef"

    def test_sends_read_path(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, content=b"data")

        asyncio.run(_collect(_client(handler), paths.DOWNLOAD_FILE, {"read_path": "gs://b/m.onnx"}))
        assert seen["body"] == {"read_path": "gs://b/m.onnx"}

    def test_non_success_status_raises_before_yielding(self):
        client = _client(lambda request: httpx.Response(404, text="missing"))
        with pytest.raises(UnexpectedStatusError) as exc_info:
            asyncio.run(_collect(client, paths.DOWNLOAD_FILE, {"read_path": "x"}))
        assert exc_info.value.status_code == 404

    def test_transport_failure_raises_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadError("reset", request=request)

        with pytest.raises(NetworkError):
            asyncio.run(_collect(_client(handler), paths.DOWNLOAD_FILE, {"read_path": "x"}))


class TestCreateRegistryClient:
    def test_uses_stripped_tracking_uri(self):
        settings = AppSettings(registry=RegistrySettings(tracking_uri="http://opsml.test/"))
        client = create_registry_client(settings)
        assert client.base_url == "http://opsml.test"
        assert client.url_for(paths.MODEL_METRICS) == "http://opsml.test/opsml/models/metrics"
        asyncio.run(client.aclose())

    def test_missing_tracking_uri_raises(self):
        settings = AppSettings(registry=RegistrySettings(tracking_uri=None))
        with pytest.raises(ConfigurationError):
            create_registry_client(settings)

    def test_satisfies_protocol(self):
        client = HttpRegistryClient(BASE_URL)
        assert isinstance(client, IRegistryClient)
        asyncio.run(client.aclose())
