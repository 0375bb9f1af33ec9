"""Identification-mode validation shared by every per-model command."""

from __future__ import annotations

from typing import Optional

from opsml_cli.core.exceptions import InvalidArgumentsError
from opsml_cli.models.metadata import IdentificationSelector


def _absent(value: Optional[str]) -> bool:
    return value is None or value == ""


def validate_identification(
    name: Optional[str] = None,
    version: Optional[str] = None,
    uid: Optional[str] = None,
) -> IdentificationSelector:
    """Check that exactly one of (name/version) or uid was supplied.

    Empty strings count as absent. Returns the selector to send to the
    registry, with absent fields normalised to ``None``.

    Raises:
        InvalidArgumentsError: if both modes or neither mode were supplied.
    """
    no_common = _absent(name) and _absent(version)
    no_uid = _absent(uid)

    if no_common == no_uid:
        raise InvalidArgumentsError("Either name/version or uid must be specified")

    return IdentificationSelector(
        name=None if _absent(name) else name,
        version=None if _absent(version) else version,
        uid=None if no_uid else uid,
    )
