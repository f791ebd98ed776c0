"""
Manifest component - Serialize and write the manifest file.

The manifest is compact UTF-8 JSON, with keys in a fixed order so that an
unchanged build graph and output directory give byte-identical files.

Invariants:
- An existing file at the destination is overwritten
- Write failures propagate; no partial manifest fallback
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from entrypoint_lister.core.entities import Manifest

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FILENAME = "webpack-entrypoints.json"


def manifest_to_dict(manifest: Manifest) -> dict[str, Any]:
    """Plain-data form of the manifest, in output key order."""
    return manifest.to_dict()


def serialize_manifest(manifest: Manifest) -> bytes:
    """Encode the manifest as compact UTF-8 JSON."""
    text = json.dumps(manifest_to_dict(manifest), ensure_ascii=False, separators=(",", ":"))
    return text.encode("utf-8")


def resolve_output_path(
    build_output_path: str | Path,
    *,
    output_dir: str | Path | None = None,
    output_filename: str = DEFAULT_OUTPUT_FILENAME,
) -> Path:
    """
    Destination of the manifest file.

    Defaults to the build's own output directory when output_dir is unset.
    """
    return Path(output_dir or build_output_path) / output_filename


def write_manifest(manifest: Manifest, destination: str | Path) -> Path:
    """
    Write the manifest to destination.

    Raises:
        OSError: If the file can't be written
    """
    path = Path(destination)
    data = serialize_manifest(manifest)
    path.write_bytes(data)
    logger.info("Wrote manifest to %s (%d bytes)", path, len(data))
    return path
