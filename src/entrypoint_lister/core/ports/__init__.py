"""
Core port interfaces.

Protocol-based interfaces for the I/O the manifest build depends on.
"""

from .output_dir import OutputDirectoryPort

__all__ = ["OutputDirectoryPort"]
