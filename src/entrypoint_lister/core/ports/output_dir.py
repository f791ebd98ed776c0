"""
Output directory port.

Read-only access to the build output directory. Filenames are the relative
names reported by the build pipeline.

Implementations: local filesystem (adapters.fs.output_dir), in-memory fakes
in tests.
"""

from __future__ import annotations

from typing import Protocol


class OutputDirectoryPort(Protocol):
    """
    Read access to build outputs.

    Both operations raise FileNotFoundError when the named file does not
    exist. Any other OSError means the file exists but cannot be read.
    """

    def size(self, name: str) -> int:
        """
        Byte length of a file.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        ...

    def read_bytes(self, name: str) -> bytes:
        """
        Full contents of a file.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        ...
