"""Model artifact selection and streaming download."""

from __future__ import annotations

import asyncio
from contextlib import aclosing
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import AsyncIterable

from opsml_cli.core.exceptions import DecodeError, LocalIOError, NoOnnxArtifactError
from opsml_cli.core.logging import get_logger
from opsml_cli.core.protocols import IRegistryClient
from opsml_cli.models.metadata import (
    DownloadedModel,
    DownloadRequest,
    IdentificationSelector,
    ModelMetadata,
)
from opsml_cli.operations.files import ensure_parent_dir
from opsml_cli.operations.metadata import metadata_path, resolve_metadata
from opsml_cli.registry import paths

logger = get_logger(__name__)


class ArtifactSelection(str, Enum):
    """Which model artifact a download should fetch.

    ``DEFAULT`` prefers the onnx export, exactly like ``ONNX``; it exists so
    callers can tell "nothing was asked for" apart from an explicit choice.
    """

    DEFAULT = "default"
    ONNX = "onnx"
    NATIVE = "native"

    @classmethod
    def from_legacy_flags(cls, onnx: bool = True, no_onnx: bool = False) -> "ArtifactSelection":
        """Translate the ``--onnx``/``--no-onnx`` flag pair.

        ``--no-onnx`` only takes effect while ``--onnx`` is also set (its
        default); every other combination keeps the default.
        """
        if onnx and no_onnx:
            return cls.NATIVE
        return cls.DEFAULT

    @property
    def wants_onnx(self) -> bool:
        return self is not ArtifactSelection.NATIVE


def artifact_filename(uri: str) -> str:
    """Return the final path segment of an artifact URI."""
    name = PurePosixPath(uri).name
    if not name:
        raise DecodeError(f"Artifact uri {uri!r} has no file name")
    return name


def select_artifact_uri(selection: ArtifactSelection, metadata: ModelMetadata) -> tuple[str, str]:
    """Pick the artifact to download as ``(filename, remote_uri)``.

    An onnx request never falls back to the trained model.

    Raises:
        NoOnnxArtifactError: if onnx is wanted but the model has no onnx export.
    """
    if selection.wants_onnx:
        if not metadata.onnx_uri:
            raise NoOnnxArtifactError(metadata.model_name, metadata.model_version)
        uri = metadata.onnx_uri
    else:
        uri = metadata.model_uri

    return artifact_filename(uri), uri


async def write_stream(chunks: AsyncIterable[bytes], local_path: Path) -> int:
    """Append each chunk to ``local_path`` as it arrives.

    The first chunk is awaited before the file is opened, so a request that
    fails outright (transport error, non-success status) leaves any existing
    file untouched. Once data flows the file is overwritten, and a failure
    mid-stream leaves the partial file in place. Only one chunk is held in
    memory at a time; file writes run in a worker thread so the event loop
    is not blocked on disk IO.

    Returns:
        Number of bytes written.
    """
    iterator = aiter(chunks)
    try:
        first = await anext(iterator)
    except StopAsyncIteration:
        first = b""

    ensure_parent_dir(local_path)
    written = 0
    try:
        fh = await asyncio.to_thread(open, local_path, "wb")
        try:
            await asyncio.to_thread(fh.write, first)
            written += len(first)
            async for chunk in iterator:
                await asyncio.to_thread(fh.write, chunk)
                written += len(chunk)
        finally:
            await asyncio.to_thread(fh.close)
    except OSError as exc:
        raise LocalIOError(str(local_path), f"cannot write artifact: {exc}") from exc
    return written


async def transfer_artifact(client: IRegistryClient, remote_uri: str, local_path: Path) -> int:
    """Stream the registry file at ``remote_uri`` into ``local_path``."""
    payload = DownloadRequest(read_path=remote_uri).model_dump()
    async with aclosing(client.stream_bytes(paths.DOWNLOAD_FILE, payload)) as chunks:
        written = await write_stream(chunks, local_path)
    logger.info("Wrote %d bytes to %s", written, local_path)
    return written


async def download_model(
    client: IRegistryClient,
    selector: IdentificationSelector,
    write_dir: str | Path,
    selection: ArtifactSelection = ArtifactSelection.DEFAULT,
) -> DownloadedModel:
    """Resolve metadata, choose the artifact, then stream it to ``write_dir``.

    The steps run strictly in order, so a missing onnx export fails before
    any download request is sent.
    """
    metadata = await resolve_metadata(client, selector, write_dir)
    filename, remote_uri = select_artifact_uri(selection, metadata)

    logger.info("Downloading model: %s, %s", filename, remote_uri)
    local_path = Path(write_dir) / filename
    written = await transfer_artifact(client, remote_uri, local_path)

    return DownloadedModel(
        metadata=metadata,
        metadata_path=metadata_path(write_dir),
        artifact_path=local_path,
        bytes_written=written,
    )
