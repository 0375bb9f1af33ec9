"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from opsml_cli.core.exceptions import ConfigurationError


class RegistrySettings(BaseSettings):
    """Connection settings for the opsml registry server."""

    model_config = {"env_prefix": "OPSML_"}

    tracking_uri: str | None = None

    def base_url(self) -> str:
        """Return the tracking URI without trailing slashes.

        Raises:
            ConfigurationError: if ``OPSML_TRACKING_URI`` is unset or blank.
        """
        uri = (self.tracking_uri or "").strip()
        if not uri:
            raise ConfigurationError("OPSML_TRACKING_URI is not set")
        return uri.rstrip("/")


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "OPSML_CLI_"}

    log_level: str = "WARNING"
    log_format: Literal["text", "json"] = "text"
    default_write_dir: str = ".models"

    registry: RegistrySettings = Field(default_factory=RegistrySettings)
