"""Type aliases used across opsml-cli."""

from __future__ import annotations

from typing import Any, Union

JsonDict = dict[str, Any]
MetricValue = Union[bool, int, float, str, None]
