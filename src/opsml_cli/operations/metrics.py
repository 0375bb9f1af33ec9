"""Model metrics retrieval and champion/challenger comparison."""

from __future__ import annotations

from typing import Sequence

from opsml_cli.core.exceptions import InvalidArgumentsError
from opsml_cli.core.logging import get_logger
from opsml_cli.core.protocols import IRegistryClient
from opsml_cli.models.metadata import IdentificationSelector
from opsml_cli.models.metrics import (
    CompareMetricRequest,
    CompareMetricResponse,
    ComparisonRow,
    MetricsResponse,
)
from opsml_cli.operations.decoding import decode_response
from opsml_cli.registry import paths

logger = get_logger(__name__)


async def get_model_metrics(client: IRegistryClient, selector: IdentificationSelector) -> MetricsResponse:
    body = await client.post_json(paths.MODEL_METRICS, selector.model_dump())
    return decode_response(MetricsResponse, body)


def build_compare_request(
    metric_names: Sequence[str],
    lower_is_better: Sequence[bool],
    challenger_uid: str,
    champion_uids: Sequence[str],
) -> CompareMetricRequest:
    """Assemble a comparison request.

    Raises:
        InvalidArgumentsError: if no metric or champion is given, or if the
            lower-is-better flags do not line up with the metric names.
    """
    if not metric_names:
        raise InvalidArgumentsError("At least one metric name is required")
    if len(lower_is_better) != len(metric_names):
        raise InvalidArgumentsError(
            f"Got {len(lower_is_better)} lower-is-better flags for {len(metric_names)} metrics"
        )
    if not challenger_uid:
        raise InvalidArgumentsError("A challenger uid is required")
    if not champion_uids:
        raise InvalidArgumentsError("At least one champion uid is required")

    return CompareMetricRequest(
        metric_name=list(metric_names),
        lower_is_better=list(lower_is_better),
        challenger_uid=challenger_uid,
        champion_uid=list(champion_uids),
    )


async def compare_model_metrics(client: IRegistryClient, request: CompareMetricRequest) -> CompareMetricResponse:
    """Ask the registry to battle the challenger against each champion.

    The win decision is made server-side; this only decodes the report.
    """
    body = await client.post_json(paths.COMPARE_METRICS, request.model_dump())
    return decode_response(CompareMetricResponse, body)


def comparison_rows(response: CompareMetricResponse) -> list[ComparisonRow]:
    """Flatten battle reports into table rows.

    A report missing either side's metric is an incomplete pairing and
    produces no row.
    """
    rows: list[ComparisonRow] = []
    for reports in response.report.values():
        for report in reports:
            if not report.is_complete:
                logger.debug("Skipping incomplete battle report for %s %s",
                             report.champion_name, report.champion_version)
                continue
            rows.append(
                ComparisonRow(
                    champion_name=report.champion_name,
                    champion_version=report.champion_version,
                    metric=report.champion_metric.name,
                    champion_value=report.champion_metric.value,
                    challenger_value=report.challenger_metric.value,
                    challenger_win=report.challenger_win,
                )
            )
    return rows
