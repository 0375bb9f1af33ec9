"""Shared fixtures: registry payloads and the in-memory registry client."""

from __future__ import annotations

import copy
import logging
from typing import Any

import pytest

from opsml_cli.registry.memory_client import MemoryRegistryClient

BASE_URL = "http://registry.test"

METADATA_ONNX: dict[str, Any] = {
    "model_name": "linear-reg",
    "model_type": "sklearn_estimator",
    "onnx_uri": "opsml-root:/OPSML_MODEL_REGISTRY/mlops/linear-reg/v1.0.0/model.onnx",
    "onnx_version": "1.14.0",
    "model_uri": "opsml-root:/OPSML_MODEL_REGISTRY/mlops/linear-reg/v1.0.0/trained-model.joblib",
    "model_version": "1.0.0",
    "model_team": "mlops",
    "sample_data": {"col_0": 0.5, "col_1": 3},
    "data_schema": {
        "model_data_schema": {
            "data_type": "numpy.ndarray",
            "input_features": {"inputs": {"feature_type": "FLOAT32", "shape": [1, 2]}},
            "output_features": {"outputs": {"feature_type": "FLOAT32", "shape": [1, 1]}},
        },
        "input_data_schema": None,
    },
}


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def metadata_onnx() -> dict[str, Any]:
    return copy.deepcopy(METADATA_ONNX)


@pytest.fixture
def metadata_no_onnx() -> dict[str, Any]:
    body = copy.deepcopy(METADATA_ONNX)
    body["onnx_uri"] = None
    body["onnx_version"] = None
    return body


@pytest.fixture
def registry() -> MemoryRegistryClient:
    return MemoryRegistryClient(base_url=BASE_URL)
