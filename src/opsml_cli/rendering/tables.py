"""Rich table rendering for registry responses."""

from __future__ import annotations

from typing import Any, Iterable

from rich import box
from rich.table import Table
from rich.text import Text

from opsml_cli.core.types import MetricValue
from opsml_cli.models.cards import Card
from opsml_cli.models.metrics import CompareMetricResponse, ComparisonRow, MetricsResponse

CARD_COLUMNS = ("name", "team", "date", "user_email", "version", "uid")
METRIC_COLUMNS = ("metric", "value", "step", "timestamp")
COMPARISON_COLUMNS = (
    "Champion Name",
    "Champion Version",
    "Metric",
    "Champion Value",
    "Challenger Value",
    "Challenger Win",
)


def _table(columns: Iterable[str], title: str | None = None) -> Table:
    table = Table(title=title, box=box.SQUARE)
    for column in columns:
        table.add_column(column, justify="center")
    return table


def _cell(value: Any) -> str:
    # None renders as "None"; ints and floats keep their own repr (5 vs 5.0)
    return str(value)


def _value_cell(value: MetricValue) -> str:
    # JSON spelling for booleans and null
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def win_indicator(challenger_win: bool) -> Text:
    if challenger_win:
        return Text("true", style="green")
    return Text("false", style="red")


def cards_table(cards: Iterable[Card]) -> Table:
    table = _table(CARD_COLUMNS)
    for card in cards:
        table.add_row(*(_cell(getattr(card, column)) for column in CARD_COLUMNS))
    return table


def metrics_table(response: MetricsResponse) -> Table:
    table = _table(METRIC_COLUMNS)
    for metrics in response.metrics.values():
        for metric in metrics:
            table.add_row(metric.name, _value_cell(metric.value), _cell(metric.step), _cell(metric.timestamp))
    return table


def comparison_table(response: CompareMetricResponse, rows: Iterable[ComparisonRow]) -> Table:
    title = f"Challenger: {response.challenger_name} {response.challenger_version}"
    table = _table(COMPARISON_COLUMNS, title=title)
    for row in rows:
        table.add_row(
            row.champion_name,
            row.champion_version,
            row.metric,
            _value_cell(row.champion_value),
            _value_cell(row.challenger_value),
            win_indicator(row.challenger_win),
        )
    return table

