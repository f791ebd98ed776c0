"""
entrypoint-lister - Post-build asset manifest generator.

Lists the scripts and stylesheets of every build entry point and, for every
output file, its content type, SRI hash and pre-compressed variants.
"""

from entrypoint_lister.adapters.fs.output_dir import LocalOutputDirectory
from entrypoint_lister.adapters.webpack_stats import parse_webpack_stats, read_webpack_stats
from entrypoint_lister.components.content_types import ContentTypeClassifier
from entrypoint_lister.components.entrypoints import build_manifest
from entrypoint_lister.components.manifest import serialize_manifest, write_manifest
from entrypoint_lister.core.entities import (
    BuildCompletedEvent,
    Chunk,
    EntrypointChunks,
    EntrypointRecord,
    FileRecord,
    Manifest,
    VariantRecord,
)
from entrypoint_lister.core.errors import BuildGraphError, EntrypointListerError, OptionsError
from entrypoint_lister.rules import ListerOptions, load_options
from entrypoint_lister.shell.hooks import BuildHooks, EntrypointListerPlugin

__version__ = "0.1.0"

__all__ = [
    # Plugin
    "BuildHooks",
    "EntrypointListerPlugin",
    # API
    "build_manifest",
    "serialize_manifest",
    "write_manifest",
    "ContentTypeClassifier",
    "LocalOutputDirectory",
    "parse_webpack_stats",
    "read_webpack_stats",
    # Options
    "ListerOptions",
    "load_options",
    # Entities
    "BuildCompletedEvent",
    "Chunk",
    "EntrypointChunks",
    "EntrypointRecord",
    "FileRecord",
    "Manifest",
    "VariantRecord",
    # Errors
    "BuildGraphError",
    "EntrypointListerError",
    "OptionsError",
]
