"""Registry server endpoint paths."""

from __future__ import annotations

LIST_CARDS = "/opsml/cards/list"
MODEL_METADATA = "/opsml/models/metadata"
DOWNLOAD_FILE = "/opsml/files/download"
MODEL_METRICS = "/opsml/models/metrics"
COMPARE_METRICS = "/opsml/models/compare_metrics"
