"""Model metric and champion/challenger comparison models."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from opsml_cli.core.types import MetricValue


class Metric(BaseModel):
    """One logged metric value.

    ``value`` keeps the wire representation: ``5`` stays an int and ``5.0``
    stays a float, ``true`` stays a bool and ``null`` is accepted.
    """

    name: str
    value: MetricValue
    step: Optional[Any] = None
    timestamp: Optional[Any] = None


class MetricsResponse(BaseModel):
    metrics: dict[str, list[Metric]]


class CompareMetricRequest(BaseModel):
    """Body of ``POST /opsml/models/compare_metrics``.

    ``lower_is_better`` is parallel to ``metric_name``.
    """

    metric_name: list[str]
    lower_is_better: list[bool]
    challenger_uid: str
    champion_uid: list[str]


class BattleReport(BaseModel):
    """Server-computed comparison of one champion against the challenger."""

    champion_name: str
    champion_version: str
    champion_metric: Optional[Metric] = None
    challenger_metric: Optional[Metric] = None
    challenger_win: bool

    @property
    def is_complete(self) -> bool:
        return self.champion_metric is not None and self.challenger_metric is not None


class CompareMetricResponse(BaseModel):
    challenger_name: str
    challenger_version: str
    report: dict[str, list[BattleReport]] = Field(default_factory=dict)


class ComparisonRow(BaseModel):
    """One rendered line of a battle report table."""

    champion_name: str
    champion_version: str
    metric: str
    champion_value: MetricValue
    challenger_value: MetricValue
    challenger_win: bool
