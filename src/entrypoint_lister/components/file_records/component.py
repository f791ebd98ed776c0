"""
File records component - Build the manifest entry for one output file.

Steps:
1. Classify the filename
2. Read the bytes once and hash them (hex digest and SRI string)
3. Record the identity variant from that digest, without rehashing
4. Probe every configured variant in configuration order

Invariants:
- The base file is read and hashed exactly once
- identity is always present; other variants only when found on disk
- A base file that can't be read is fatal: the error propagates
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from entrypoint_lister.components.content_types import ContentTypeClassifier
from entrypoint_lister.components.hashing import Hasher, hash_file, sha512_hex, sri_from_hex
from entrypoint_lister.components.variants import (
    DEFAULT_VARIANTS,
    probe_identity,
    probe_variants,
)
from entrypoint_lister.core.entities import IDENTITY_VARIANT, FileRecord, VariantRecord
from entrypoint_lister.core.ports import OutputDirectoryPort

logger = logging.getLogger(__name__)


def build_file_record(
    file: str,
    *,
    directory: OutputDirectoryPort,
    classifier: ContentTypeClassifier,
    variants: Mapping[str, str] = DEFAULT_VARIANTS,
    hasher: Hasher = sha512_hex,
    content_type: str | None = None,
) -> FileRecord:
    """
    Build the FileRecord for one output file.

    Args:
        file: Filename relative to the output directory.
        directory: Output directory port.
        classifier: Content-type classifier.
        variants: Variant name -> filename suffix, probed in order.
        hasher: Digest function (hex output).
        content_type: Content type already determined by the caller;
            classified here when None.

    Returns:
        Complete FileRecord.

    Raises:
        FileNotFoundError: If the base file doesn't exist
    """
    if content_type is None:
        content_type = classifier.classify(file)
    content_hash = hash_file(directory, file, hasher=hasher)

    identity = probe_identity(file, content_hash, directory=directory)
    if identity.record is None:
        raise FileNotFoundError(f"Output file disappeared while hashing: {file}")

    file_variants: dict[str, VariantRecord] = {IDENTITY_VARIANT: identity.record}
    for probe in probe_variants(file, variants, directory=directory, hasher=hasher):
        if probe.record is not None:
            file_variants[probe.name] = probe.record

    logger.debug(
        "Recorded %s (%s) with variants: %s",
        file,
        content_type,
        ", ".join(file_variants),
    )

    return FileRecord(
        content_type=content_type,
        sri_hash=sri_from_hex(content_hash),
        variants=file_variants,
    )
