"""opsml-cli exception hierarchy."""

from __future__ import annotations


class OpsmlCliError(Exception):
    """Base exception for all opsml-cli errors."""


class InvalidArgumentsError(OpsmlCliError):
    """Request arguments violate an identification or selection rule."""


class ConfigurationError(OpsmlCliError):
    """Required configuration (e.g. the registry base URL) is missing."""


class NetworkError(OpsmlCliError):
    """Transport-level failure talking to the registry."""


class UnexpectedStatusError(OpsmlCliError):
    """Registry answered with a non-success status code."""

    def __init__(self, status_code: int, url: str, detail: str = "") -> None:
        self.status_code = status_code
        self.url = url
        self.detail = detail
        message = f"Registry returned {status_code} for {url}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class DecodeError(OpsmlCliError):
    """Registry response body does not match the expected schema."""


class NoOnnxArtifactError(OpsmlCliError):
    """An optimized (onnx) artifact was requested but the model has none."""

    def __init__(self, model_name: str, model_version: str) -> None:
        self.model_name = model_name
        self.model_version = model_version
        super().__init__(f"No onnx model uri found for {model_name} {model_version}")


class LocalIOError(OpsmlCliError):
    """Creating a directory or writing a local file failed."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
