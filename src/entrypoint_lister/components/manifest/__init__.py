"""
Manifest component - Serialize and write the manifest file.
"""

from .component import (
    DEFAULT_OUTPUT_FILENAME,
    manifest_to_dict,
    resolve_output_path,
    serialize_manifest,
    write_manifest,
)

__all__ = [
    "DEFAULT_OUTPUT_FILENAME",
    "manifest_to_dict",
    "resolve_output_path",
    "serialize_manifest",
    "write_manifest",
]
