"""Model metadata resolution and persistence."""

from __future__ import annotations

from pathlib import Path

from opsml_cli.core.logging import get_logger
from opsml_cli.core.protocols import IRegistryClient
from opsml_cli.models.metadata import IdentificationSelector, ModelMetadata
from opsml_cli.operations.decoding import decode_response
from opsml_cli.operations.files import write_text
from opsml_cli.registry import paths

logger = get_logger(__name__)

METADATA_FILENAME = "metadata.json"


def metadata_path(write_dir: str | Path) -> Path:
    return Path(write_dir) / METADATA_FILENAME


def save_metadata(metadata: ModelMetadata, path: Path) -> None:
    """Write ``metadata`` as JSON, replacing any previous snapshot."""
    write_text(path, metadata.model_dump_json(indent=2))
    logger.info("Saved model metadata to %s", path)


async def resolve_metadata(
    client: IRegistryClient,
    selector: IdentificationSelector,
    write_dir: str | Path,
) -> ModelMetadata:
    """Fetch metadata for the selected model and persist it to ``write_dir``.

    Metadata is requested on every call; nothing is cached between runs.

    Raises:
        DecodeError: if the registry body is not valid ModelMetadata.
        LocalIOError: if ``write_dir/metadata.json`` cannot be written.
    """
    body = await client.post_json(paths.MODEL_METADATA, selector.model_dump())
    metadata = decode_response(ModelMetadata, body)
    save_metadata(metadata, metadata_path(write_dir))
    return metadata
