"""
File records component - Build the manifest entry for one output file.
"""

from .component import build_file_record

__all__ = ["build_file_record"]
