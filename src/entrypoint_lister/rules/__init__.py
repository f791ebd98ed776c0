"""Lister options: pydantic models and the YAML loader."""

from .loader import load_options, parse_options
from .models import ContentTypePattern, ListerOptions, SuffixPattern

__all__ = [
    "ContentTypePattern",
    "ListerOptions",
    "SuffixPattern",
    "load_options",
    "parse_options",
]
