"""Tag filter construction for list queries."""

from __future__ import annotations

from typing import Optional, Sequence

from opsml_cli.core.logging import get_logger

logger = get_logger(__name__)


def build_tag_filter(
    tag_names: Optional[Sequence[str]] = None,
    tag_values: Optional[Sequence[str]] = None,
) -> dict[str, str]:
    """Zip tag names and values into a filter mapping.

    Pairs are matched by position and anything past the shorter sequence is
    dropped. A repeated name keeps the last value. When only one side is
    given the result is empty; that side is discarded, not rejected.
    """
    if tag_names is None or tag_values is None:
        if tag_names or tag_values:
            logger.warning("Ignoring tag filter: both tag names and tag values are required")
        return {}

    tags: dict[str, str] = {}
    for name, value in zip(tag_names, tag_values):
        tags[name] = value
    return tags
