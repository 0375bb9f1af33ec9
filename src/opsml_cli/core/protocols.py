"""Protocol interfaces for opsml-cli abstractions.

Operations talk to the registry only through these Protocols, so the httpx
client and the in-memory fake are interchangeable.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Protocol, runtime_checkable

from opsml_cli.core.types import JsonDict


# ---------------------------------------------------------------------------
# Registry Client
# ---------------------------------------------------------------------------

@runtime_checkable
class IRegistryClient(Protocol):
    """Request/response access to the opsml registry server."""

    async def post_json(self, path: str, payload: JsonDict) -> Any: ...

    def stream_bytes(self, path: str, payload: JsonDict) -> AsyncIterator[bytes]: ...
