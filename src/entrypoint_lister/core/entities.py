"""
Core entities for entrypoint manifests.

The manifest is built fresh for every completed build and handed to the
writer fully materialized.

Invariants:
- Every filename listed by an EntrypointRecord is a key of Manifest.files
- A FileRecord always carries the identity variant
- The identity variant hash is the digest behind FileRecord.sri_hash
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

IDENTITY_VARIANT = "identity"


# --- Build graph (collaborator input) ---


@dataclass(frozen=True)
class Chunk:
    """One chunk of a build: an ordered list of output filenames."""

    files: list[str]
    id: str | int | None = None


@dataclass(frozen=True)
class EntrypointChunks:
    """A named entry point and the chunks it loads, in build order."""

    name: str
    chunks: list[Chunk]


@dataclass(frozen=True)
class BuildCompletedEvent:
    """Payload of the "build completed" lifecycle hook."""

    output_path: Path
    entrypoints: list[EntrypointChunks]


# --- Manifest ---


@dataclass(frozen=True)
class VariantRecord:
    """A file variant present on disk (identity or pre-compressed)."""

    file: str
    size: int
    hash: str

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.file, "size": self.size, "hash": self.hash}


@dataclass(frozen=True)
class FileRecord:
    """Content type, integrity hash and variants of one output file."""

    content_type: str
    sri_hash: str
    variants: dict[str, VariantRecord]

    @property
    def identity(self) -> VariantRecord:
        return self.variants[IDENTITY_VARIANT]

    def to_dict(self) -> dict[str, Any]:
        return {
            "contentType": self.content_type,
            "sriHash": self.sri_hash,
            "variants": {name: v.to_dict() for name, v in self.variants.items()},
        }


@dataclass
class EntrypointRecord:
    """Scripts and stylesheets loaded by one entry point."""

    stylesheets: list[str] = field(default_factory=list)
    scripts: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"stylesheets": list(self.stylesheets), "scripts": list(self.scripts)}


@dataclass
class Manifest:
    """Root manifest object: entry points and the files they reference."""

    entrypoints: dict[str, EntrypointRecord] = field(default_factory=dict)
    files: dict[str, FileRecord] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "entrypoints": {name: ep.to_dict() for name, ep in self.entrypoints.items()},
            "files": {name: rec.to_dict() for name, rec in self.files.items()},
        }
