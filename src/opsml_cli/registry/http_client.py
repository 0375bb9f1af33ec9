"""httpx-backed registry client implementing IRegistryClient."""

from __future__ import annotations

from typing import Any, AsyncIterator

import httpx

from opsml_cli.core.exceptions import DecodeError, NetworkError, UnexpectedStatusError
from opsml_cli.core.logging import get_logger
from opsml_cli.core.types import JsonDict

logger = get_logger(__name__)

_DETAIL_LIMIT = 200


class HttpRegistryClient:
    """Production IRegistryClient talking to an opsml server over HTTP.

    One instance wraps one ``httpx.AsyncClient`` and is meant to live for the
    whole CLI process. Requests never time out and are never retried.
    """

    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=None, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def __aenter__(self) -> "HttpRegistryClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def post_json(self, path: str, payload: JsonDict) -> Any:
        url = self.url_for(path)
        logger.debug("POST %s", url)
        try:
            response = await self._client.post(url, json=payload)
        except httpx.TransportError as exc:
            raise NetworkError(f"POST {url} failed: {exc}") from exc

        if not response.is_success:
            raise UnexpectedStatusError(response.status_code, url, response.text[:_DETAIL_LIMIT])

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"Response from {url} is not valid JSON: {exc}") from exc

    async def stream_bytes(self, path: str, payload: JsonDict) -> AsyncIterator[bytes]:
        """Yield the response body chunk by chunk as it arrives."""
        url = self.url_for(path)
        logger.debug("POST %s (streaming)", url)
        try:
            async with self._client.stream("POST", url, json=payload) as response:
                if not response.is_success:
                    body = await response.aread()
                    detail = body[:_DETAIL_LIMIT].decode("utf-8", errors="replace")
                    raise UnexpectedStatusError(response.status_code, url, detail)
                async for chunk in response.aiter_bytes():
                    yield chunk
        except httpx.TransportError as exc:
            raise NetworkError(f"POST {url} failed: {exc}") from exc
