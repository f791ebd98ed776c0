"""
Webpack stats adapter.

Turns the JSON written by ``webpack --json`` (or stats.toJson()) into a
BuildCompletedEvent. Only the parts the manifest needs are read:

- ``outputPath``: absolute output directory
- ``entrypoints``: ordered object, name -> {"chunks": [chunk ids]}
- ``chunks``: list of {"id": ..., "files": [...]}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from entrypoint_lister.core.entities import BuildCompletedEvent, Chunk, EntrypointChunks
from entrypoint_lister.core.errors import BuildGraphError

logger = logging.getLogger(__name__)


def _index_chunks(chunks_raw: Any, source: str | None) -> dict[Any, Chunk]:
    if not isinstance(chunks_raw, list):
        raise BuildGraphError("chunks must be an array", source=source)

    chunks: dict[Any, Chunk] = {}
    for raw in chunks_raw:
        if not isinstance(raw, Mapping) or "id" not in raw:
            raise BuildGraphError("every chunk needs an id", source=source)
        files = raw.get("files", [])
        if not isinstance(files, list):
            raise BuildGraphError(f"files of chunk {raw['id']!r} must be an array", source=source)
        chunks[raw["id"]] = Chunk(files=[str(f) for f in files], id=raw["id"])
    return chunks


def parse_webpack_stats(
    stats: Mapping[str, Any],
    *,
    output_path: str | Path | None = None,
    source: str | None = None,
) -> BuildCompletedEvent:
    """
    Build a BuildCompletedEvent from parsed webpack stats.

    Args:
        stats: Parsed stats JSON object.
        output_path: Overrides stats["outputPath"] when given.
        source: Label used in error messages (usually the stats file path).

    Raises:
        BuildGraphError: If required fields are missing or inconsistent
    """
    if not isinstance(stats, Mapping):
        raise BuildGraphError("stats must be a JSON object", source=source)

    resolved_output = output_path or stats.get("outputPath")
    if not resolved_output:
        raise BuildGraphError("outputPath missing and no output path given", source=source)

    entrypoints_raw = stats.get("entrypoints")
    if not isinstance(entrypoints_raw, Mapping):
        raise BuildGraphError("entrypoints must be an object", source=source)

    chunks = _index_chunks(stats.get("chunks"), source)

    entrypoints: list[EntrypointChunks] = []
    for name, ep in entrypoints_raw.items():
        chunk_ids = ep.get("chunks", []) if isinstance(ep, Mapping) else None
        if not isinstance(chunk_ids, list):
            raise BuildGraphError(f"chunks of entrypoint {name!r} must be an array", source=source)

        ep_chunks: list[Chunk] = []
        for chunk_id in chunk_ids:
            if chunk_id not in chunks:
                raise BuildGraphError(
                    f"entrypoint {name!r} references unknown chunk {chunk_id!r}",
                    source=source,
                )
            ep_chunks.append(chunks[chunk_id])
        entrypoints.append(EntrypointChunks(name=str(name), chunks=ep_chunks))

    logger.debug("Parsed %d entry points, %d chunks", len(entrypoints), len(chunks))

    return BuildCompletedEvent(output_path=Path(resolved_output), entrypoints=entrypoints)


def read_webpack_stats(
    path: Path,
    *,
    output_path: str | Path | None = None,
) -> BuildCompletedEvent:
    """
    Load a webpack stats file.

    Raises FileNotFoundError if the file is missing.
    Raises BuildGraphError if it isn't valid stats JSON.
    """
    if not path.exists():
        raise FileNotFoundError(f"Stats file not found at: {path}")

    try:
        stats = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise BuildGraphError(f"invalid JSON: {e}", source=str(path)) from e

    return parse_webpack_stats(stats, output_path=output_path, source=str(path))
