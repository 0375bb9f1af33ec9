"""Registry clients behind the IRegistryClient Protocol."""

from __future__ import annotations

import httpx

from opsml_cli.core.config import AppSettings
from opsml_cli.registry.http_client import HttpRegistryClient
from opsml_cli.registry.memory_client import MemoryRegistryClient

__all__ = ["HttpRegistryClient", "MemoryRegistryClient", "create_registry_client"]


def create_registry_client(
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HttpRegistryClient:
    """Create the HTTP registry client from application settings.

    Raises:
        ConfigurationError: if no tracking URI is configured.
    """
    if settings is None:
        settings = AppSettings()

    return HttpRegistryClient(base_url=settings.registry.base_url(), transport=transport)
