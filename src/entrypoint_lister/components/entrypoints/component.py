"""
Entrypoints component - Assemble the manifest from the build graph.

Walks entry point -> chunk -> file in build order. Scripts and stylesheets
are listed on their entry point; every referenced file, whatever its content
type, gets one FileRecord in the shared files mapping.

Invariants:
- A FileRecord is built at most once per filename per manifest
- Entry points, chunks and files keep the build graph's order
- Duplicate references are listed again but not rehashed
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from entrypoint_lister.components.content_types import (
    SCRIPT_CONTENT_TYPE,
    STYLESHEET_CONTENT_TYPE,
    ContentTypeClassifier,
)
from entrypoint_lister.components.file_records import build_file_record
from entrypoint_lister.components.hashing import Hasher, sha512_hex
from entrypoint_lister.components.variants import DEFAULT_VARIANTS
from entrypoint_lister.core.entities import (
    BuildCompletedEvent,
    EntrypointRecord,
    Manifest,
)
from entrypoint_lister.core.ports import OutputDirectoryPort

from .models import BuildManifestInput, BuildManifestOutput

logger = logging.getLogger(__name__)


def build_manifest(
    event: BuildCompletedEvent,
    *,
    directory: OutputDirectoryPort,
    classifier: ContentTypeClassifier | None = None,
    variants: Mapping[str, str] = DEFAULT_VARIANTS,
    hasher: Hasher = sha512_hex,
) -> Manifest:
    """
    Build the manifest for a completed build.

    Args:
        event: Build graph and output path.
        directory: Output directory port the filenames resolve against.
        classifier: Content-type classifier. Uses default rules if None.
        variants: Variant name -> filename suffix.
        hasher: Digest function (hex output).

    Returns:
        Fully materialized Manifest.

    Raises:
        FileNotFoundError: If a file the build reported can't be found
    """
    return run(
        BuildManifestInput(event=event),
        directory=directory,
        classifier=classifier,
        variants=variants,
        hasher=hasher,
    ).manifest


def run(
    inp: BuildManifestInput,
    *,
    directory: OutputDirectoryPort,
    classifier: ContentTypeClassifier | None = None,
    variants: Mapping[str, str] = DEFAULT_VARIANTS,
    hasher: Hasher = sha512_hex,
) -> BuildManifestOutput:
    """
    Main entry point for the entrypoints component.

    Returns:
        BuildManifestOutput with the manifest and reference counts.
    """
    if classifier is None:
        classifier = ContentTypeClassifier()

    manifest = Manifest()
    references = 0

    for entry in inp.event.entrypoints:
        record = EntrypointRecord()
        manifest.entrypoints[entry.name] = record

        for chunk in entry.chunks:
            for file in chunk.files:
                references += 1
                content_type = classifier.classify(file)

                if content_type == SCRIPT_CONTENT_TYPE:
                    record.scripts.append(file)
                elif content_type == STYLESHEET_CONTENT_TYPE:
                    record.stylesheets.append(file)

                if file not in manifest.files:
                    manifest.files[file] = build_file_record(
                        file,
                        directory=directory,
                        classifier=classifier,
                        variants=variants,
                        hasher=hasher,
                        content_type=content_type,
                    )

    logger.info(
        "Built manifest: %d entry points, %d files (%d references)",
        len(manifest.entrypoints),
        len(manifest.files),
        references,
    )

    return BuildManifestOutput(
        manifest=manifest,
        files_recorded=len(manifest.files),
        references=references,
    )
