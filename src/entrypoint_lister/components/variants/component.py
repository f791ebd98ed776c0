"""
Variants component - Discover pre-compressed siblings of output files.

A variant of "main.js" with suffix ".br" is the file "main.js.br" in the
same output directory. The identity variant has an empty suffix.

Invariants:
- A missing variant file is ABSENT, never an error
- Any other read failure propagates to the caller
- The caller owns the variants mapping; probing returns a value
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from entrypoint_lister.components.hashing import Hasher, hash_file, sha512_hex
from entrypoint_lister.core.entities import IDENTITY_VARIANT, VariantRecord
from entrypoint_lister.core.ports import OutputDirectoryPort

from .models import VariantProbe

logger = logging.getLogger(__name__)

# --- Default Configuration ---

DEFAULT_VARIANTS: dict[str, str] = {
    "br": ".br",
    "gzip": ".gz",
}


def variant_filename(file: str, suffix: str) -> str:
    """Filename of a variant: base filename plus suffix."""
    return file + suffix


def probe_variant(
    file: str,
    name: str,
    suffix: str,
    *,
    directory: OutputDirectoryPort,
    known_hash: str | None = None,
    hasher: Hasher = sha512_hex,
) -> VariantProbe:
    """
    Look for one variant of a file.

    Args:
        file: Base filename, relative to the output directory.
        name: Variant name (e.g. "br").
        suffix: Suffix appended to the base filename (e.g. ".br").
        directory: Output directory port.
        known_hash: Digest already computed for these bytes; skips rehashing.
        hasher: Digest function for variants without a known hash.

    Returns:
        VariantProbe, ABSENT if the variant file doesn't exist.
    """
    variant_file = variant_filename(file, suffix)
    try:
        size = directory.size(variant_file)
    except FileNotFoundError:
        logger.debug("No %s variant for %s", name, file)
        return VariantProbe.absent(name)

    if known_hash is not None:
        digest = known_hash
    else:
        digest = hash_file(directory, variant_file, hasher=hasher)
    return VariantProbe.present(name, VariantRecord(file=variant_file, size=size, hash=digest))


def probe_identity(
    file: str,
    known_hash: str,
    *,
    directory: OutputDirectoryPort,
) -> VariantProbe:
    """Record the uncompressed file itself, reusing its digest."""
    return probe_variant(file, IDENTITY_VARIANT, "", directory=directory, known_hash=known_hash)


def probe_variants(
    file: str,
    variants: Mapping[str, str],
    *,
    directory: OutputDirectoryPort,
    hasher: Hasher = sha512_hex,
) -> list[VariantProbe]:
    """Probe every configured variant, in configuration order."""
    return [
        probe_variant(file, name, suffix, directory=directory, hasher=hasher)
        for name, suffix in variants.items()
    ]
