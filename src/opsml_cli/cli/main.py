"""opsml-cli command-line entry point.

Usage:
    opsml-cli list-cards --registry model --name my-model
    opsml-cli download-model --name my-model --version 1.0.0 --artifact native
    opsml-cli compare-model-metrics --metric-name mae --lower-is-better true --challenger-uid abc --champion-uid def,ghi
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

import httpx
from rich.console import Console

from opsml_cli.core.config import AppSettings
from opsml_cli.core.exceptions import InvalidArgumentsError, OpsmlCliError
from opsml_cli.core.logging import get_logger, setup_logging
from opsml_cli.core.protocols import IRegistryClient
from opsml_cli.models.cards import RegistryName
from opsml_cli.operations.artifacts import ArtifactSelection, download_model
from opsml_cli.operations.listing import build_list_query, list_cards
from opsml_cli.operations.metadata import resolve_metadata
from opsml_cli.operations.metrics import (
    build_compare_request,
    compare_model_metrics,
    comparison_rows,
    get_model_metrics,
)
from opsml_cli.operations.validation import validate_identification
from opsml_cli.registry import create_registry_client
from opsml_cli.rendering.tables import cards_table, comparison_table, metrics_table

logger = get_logger(__name__)

_TRUE = ("1", "true", "yes", "y")
_FALSE = ("0", "false", "no", "n")


def _csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _csv_bools(value: str) -> list[bool]:
    flags = []
    for item in _csv(value):
        lowered = item.lower()
        if lowered in _TRUE:
            flags.append(True)
        elif lowered in _FALSE:
            flags.append(False)
        else:
            raise argparse.ArgumentTypeError(f"not a boolean: {item!r}")
    return flags


def _add_identification(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name", default=None, help="Name given to the card")
    parser.add_argument("--version", default=None, help="Card version")
    parser.add_argument("--uid", default=None, help="Card uid")


def build_parser(settings: AppSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="opsml-cli", description="CLI tool for interacting with an opsml server")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list-cards", help="List cards from a registry")
    p.add_argument("--registry", required=True, choices=[r.value for r in RegistryName],
                   help="Registry to list cards from")
    p.add_argument("--name", default=None, help="Name given to the card")
    p.add_argument("--team", default=None, help="Team name")
    p.add_argument("--version", default=None, help="Card version")
    p.add_argument("--uid", default=None, help="Card uid")
    p.add_argument("--limit", type=int, default=None, help="Maximum number of cards returned")
    p.add_argument("--tag-name", "--tag_name", dest="tag_name", type=_csv, default=None,
                   help="Comma-separated tag names")
    p.add_argument("--tag-value", "--tag_value", dest="tag_value", type=_csv, default=None,
                   help="Comma-separated tag values, paired with --tag-name by position")
    p.add_argument("--max-date", "--max_date", dest="max_date", default=None, help="Latest card date")

    p = sub.add_parser("download-model-metadata", help="Download model metadata from the model registry")
    _add_identification(p)
    p.add_argument("--write-dir", default=settings.default_write_dir, help="Directory to write to")

    p = sub.add_parser("download-model", help="Download a model and its metadata from the model registry")
    _add_identification(p)
    p.add_argument("--write-dir", default=settings.default_write_dir, help="Directory to write to")
    p.add_argument("--artifact", choices=[s.value for s in ArtifactSelection], default=None,
                   help="Artifact to download (default prefers onnx)")
    p.add_argument("--onnx", action="store_true", default=True, help=argparse.SUPPRESS)
    p.add_argument("--no-onnx", action="store_true", default=False,
                   help="Download the trained model instead of the onnx export")

    p = sub.add_parser("get-model-metrics", help="Retrieve model metrics")
    _add_identification(p)

    p = sub.add_parser("compare-model-metrics", help="Compare challenger metrics against champions")
    p.add_argument("--metric-name", "--metric_name", dest="metric_name", type=_csv, required=True,
                   help="Comma-separated metric names")
    p.add_argument("--lower-is-better", "--lower_is_better", dest="lower_is_better", type=_csv_bools,
                   required=True, help="Comma-separated booleans, one per metric")
    p.add_argument("--challenger-uid", "--challenger_uid", dest="challenger_uid", required=True,
                   help="Challenger model uid")
    p.add_argument("--champion-uid", "--champion_uid", dest="champion_uid", type=_csv, required=True,
                   help="Comma-separated champion model uids")

    return parser


def artifact_selection(args: argparse.Namespace) -> ArtifactSelection:
    """Resolve the artifact choice; ``--artifact`` wins over the legacy flags."""
    if args.artifact is not None and args.artifact != ArtifactSelection.DEFAULT.value:
        if args.no_onnx:
            raise InvalidArgumentsError("--artifact and --no-onnx cannot be combined")
        return ArtifactSelection(args.artifact)
    return ArtifactSelection.from_legacy_flags(onnx=args.onnx, no_onnx=args.no_onnx)


async def run_command(args: argparse.Namespace, client: IRegistryClient, console: Console) -> None:
    """Run one parsed subcommand against an open registry client."""
    command = args.command

    if command == "list-cards":
        query = build_list_query(
            args.registry,
            name=args.name,
            team=args.team,
            version=args.version,
            uid=args.uid,
            limit=args.limit,
            tag_names=args.tag_name,
            tag_values=args.tag_value,
            max_date=args.max_date,
        )
        cards = await list_cards(client, query)
        console.print(cards_table(cards))

    elif command == "download-model-metadata":
        selector = validate_identification(args.name, args.version, args.uid)
        metadata = await resolve_metadata(client, selector, args.write_dir)
        console.print(f"Saved metadata for {metadata.model_name} {metadata.model_version}")

    elif command == "download-model":
        selection = artifact_selection(args)
        selector = validate_identification(args.name, args.version, args.uid)
        result = await download_model(client, selector, args.write_dir, selection)
        console.print(f"Downloaded model: {result.artifact_path}")

    elif command == "get-model-metrics":
        selector = validate_identification(args.name, args.version, args.uid)
        response = await get_model_metrics(client, selector)
        console.print(metrics_table(response))

    elif command == "compare-model-metrics":
        request = build_compare_request(
            args.metric_name, args.lower_is_better, args.challenger_uid, args.champion_uid,
        )
        response = await compare_model_metrics(client, request)
        console.print(comparison_table(response, comparison_rows(response)))

    else:
        raise InvalidArgumentsError(f"Unknown command {command!r}")


async def _run(
    args: argparse.Namespace,
    settings: AppSettings,
    console: Console,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    async with create_registry_client(settings, transport=transport) as client:
        task = asyncio.create_task(run_command(args, client, console))
        await task


def main(argv: Sequence[str] | None = None, transport: httpx.AsyncBaseTransport | None = None) -> int:
    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    try:
        asyncio.run(_run(args, settings, Console(), transport))
    except OpsmlCliError as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
