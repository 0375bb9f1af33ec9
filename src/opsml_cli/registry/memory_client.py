"""In-memory registry client for unit tests: canned responses."""

from __future__ import annotations

from typing import Any, AsyncIterator

from opsml_cli.core.exceptions import UnexpectedStatusError
from opsml_cli.core.types import JsonDict


class MemoryRegistryClient:
    """Canned-response IRegistryClient that records every request it sees."""

    def __init__(self, base_url: str = "http://registry.test") -> None:
        self.base_url = base_url
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self._responses: dict[str, Any] = {}
        self._streams: dict[str, list[bytes]] = {}

    def set_response(self, path: str, body: Any) -> None:
        self._responses[path] = body

    def set_stream(self, path: str, chunks: list[bytes]) -> None:
        self._streams[path] = list(chunks)

    def paths_called(self) -> list[str]:
        return [path for path, _ in self.calls]

    async def post_json(self, path: str, payload: JsonDict) -> Any:
        self.calls.append((path, payload))
        if path not in self._responses:
            raise UnexpectedStatusError(404, f"{self.base_url}{path}")
        return self._responses[path]

    async def stream_bytes(self, path: str, payload: JsonDict) -> AsyncIterator[bytes]:
        self.calls.append((path, payload))
        if path not in self._streams:
            raise UnexpectedStatusError(404, f"{self.base_url}{path}")
        for chunk in self._streams[path]:
            yield chunk
