"""Local filesystem helpers for metadata and artifact writes."""

from __future__ import annotations

from pathlib import Path

from opsml_cli.core.exceptions import LocalIOError


def ensure_parent_dir(path: Path) -> None:
    """Create every missing parent directory of ``path``."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise LocalIOError(str(path.parent), f"cannot create directory: {exc}") from exc


def write_text(path: Path, text: str) -> None:
    """Overwrite ``path`` with ``text``, creating parent directories first."""
    ensure_parent_dir(path)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise LocalIOError(str(path), f"cannot write file: {exc}") from exc
