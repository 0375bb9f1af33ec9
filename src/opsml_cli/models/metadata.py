"""Model metadata models and the requests that fetch them."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel


class IdentificationSelector(BaseModel):
    """Identifies a card by (name, version) or by uid, never both.

    Validation of the exclusive modes lives in
    :func:`opsml_cli.operations.validation.validate_identification` so the
    selector can also carry the raw CLI input that is being checked.
    """

    name: Optional[str] = None
    version: Optional[str] = None
    uid: Optional[str] = None


class DownloadRequest(BaseModel):
    """Body of ``POST /opsml/files/download``."""

    read_path: str


class ModelDataSchema(BaseModel):
    data_type: str
    input_features: dict[str, Any]
    output_features: dict[str, Any]


class DataSchema(BaseModel):
    model_config = {"protected_namespaces": ()}

    model_data_schema: ModelDataSchema
    input_data_schema: Optional[dict[str, Any]] = None


class ModelMetadata(BaseModel):
    """Metadata describing a registered model and where its artifacts live.

    ``model_uri`` always points at the trained artifact; ``onnx_uri`` is only
    present when an optimized export exists.
    """

    model_config = {"protected_namespaces": ()}

    model_name: str
    model_type: str
    onnx_uri: Optional[str] = None
    onnx_version: Optional[str] = None
    model_uri: str
    model_version: str
    model_team: str
    sample_data: dict[str, Any]
    data_schema: DataSchema


class DownloadedModel(BaseModel):
    """Outcome of a model download: what was fetched and where it landed."""

    metadata: ModelMetadata
    metadata_path: Path
    artifact_path: Path
    bytes_written: int
