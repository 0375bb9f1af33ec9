"""Registry card listing."""

from __future__ import annotations

from typing import Optional, Sequence

from opsml_cli.core.exceptions import InvalidArgumentsError
from opsml_cli.core.protocols import IRegistryClient
from opsml_cli.models.cards import Card, ListCardResponse, ListQuery, RegistryName
from opsml_cli.operations.decoding import decode_response
from opsml_cli.operations.tags import build_tag_filter
from opsml_cli.registry import paths


def resolve_registry(registry: str | RegistryName) -> RegistryName:
    try:
        return RegistryName(registry)
    except ValueError as exc:
        choices = ", ".join(r.value for r in RegistryName)
        raise InvalidArgumentsError(f"Unknown registry {registry!r} (expected one of: {choices})") from exc


def build_list_query(
    registry: str | RegistryName,
    *,
    name: Optional[str] = None,
    team: Optional[str] = None,
    version: Optional[str] = None,
    uid: Optional[str] = None,
    limit: Optional[int] = None,
    tag_names: Optional[Sequence[str]] = None,
    tag_values: Optional[Sequence[str]] = None,
    max_date: Optional[str] = None,
) -> ListQuery:
    return ListQuery(
        table_name=resolve_registry(registry).table_name,
        name=name,
        team=team,
        version=version,
        uid=uid,
        limit=limit,
        tags=build_tag_filter(tag_names, tag_values),
        max_date=max_date,
    )


async def list_cards(client: IRegistryClient, query: ListQuery) -> list[Card]:
    body = await client.post_json(paths.LIST_CARDS, query.model_dump())
    return decode_response(ListCardResponse, body).cards
