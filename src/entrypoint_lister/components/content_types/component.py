"""
Content types component - Classify output files by filename.

Rules are evaluated in declaration order and the first match wins. Files no
rule matches are "application/octet-stream".

Configuration:
- content_types replaces the default rules entirely
- additional_content_types is merged on top: a content type that already
  exists keeps its position and takes the new matcher, a new one is appended

Invariants:
- Same filename and same rules always give the same content type
- Matching is done against the filename passed in, never a resolved path
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from .models import ContentTypeRule, FilenameMatcher, PatternMatcher, SuffixMatcher

SCRIPT_CONTENT_TYPE = "application/javascript"
STYLESHEET_CONTENT_TYPE = "text/css"
FALLBACK_CONTENT_TYPE = "application/octet-stream"

# --- Default Configuration ---

DEFAULT_CONTENT_TYPE_PATTERNS: dict[str, str] = {
    SCRIPT_CONTENT_TYPE: r"\.js$",
    STYLESHEET_CONTENT_TYPE: r"\.css$",
    "image/svg+xml": r"\.svg$",
    "image/png": r"\.png$",
    "text/plain": r"\.(js|css)\.map$",
}


# --- Helper Functions ---


def make_matcher(pattern: Any) -> FilenameMatcher:
    """
    Build a matcher from a configuration value.

    Accepts a regex string or compiled pattern, a mapping or object with a
    ``suffix``, or any object that already has a ``test(filename)`` method.
    """
    if isinstance(pattern, str):
        return PatternMatcher.compile(pattern)
    if isinstance(pattern, re.Pattern):
        return PatternMatcher(pattern)
    if isinstance(pattern, Mapping) and "suffix" in pattern:
        return SuffixMatcher(str(pattern["suffix"]))
    suffix = getattr(pattern, "suffix", None)
    if isinstance(suffix, str):
        return SuffixMatcher(suffix)
    if callable(getattr(pattern, "test", None)):
        return pattern  # type: ignore[no-any-return]
    raise TypeError(f"Cannot build a filename matcher from {pattern!r}")


def build_rules(
    content_types: Mapping[str, Any] | None = None,
    additional_content_types: Mapping[str, Any] | None = None,
) -> list[ContentTypeRule]:
    """
    Build the ordered rule list from configuration.

    Args:
        content_types: Full replacement for the defaults, or None for defaults.
        additional_content_types: Rules merged on top of the base set.

    Returns:
        Ordered list of rules.
    """
    base = DEFAULT_CONTENT_TYPE_PATTERNS if content_types is None else content_types
    merged: dict[str, Any] = dict(base)
    merged.update(additional_content_types or {})
    return [
        ContentTypeRule(content_type=ct, matcher=make_matcher(pattern))
        for ct, pattern in merged.items()
    ]


def determine_content_type(filename: str, rules: Iterable[ContentTypeRule]) -> str:
    """Return the content type of the first matching rule."""
    for rule in rules:
        if rule.matcher.test(filename):
            return rule.content_type
    return FALLBACK_CONTENT_TYPE


# --- Classifier ---


class ContentTypeClassifier:
    """Ordered content-type rules with a classify() entry point."""

    def __init__(self, rules: Iterable[ContentTypeRule] | None = None) -> None:
        self._rules = list(rules) if rules is not None else build_rules()

    @classmethod
    def from_patterns(
        cls,
        content_types: Mapping[str, Any] | None = None,
        additional_content_types: Mapping[str, Any] | None = None,
    ) -> ContentTypeClassifier:
        return cls(build_rules(content_types, additional_content_types))

    @property
    def rules(self) -> list[ContentTypeRule]:
        return list(self._rules)

    @property
    def content_types(self) -> list[str]:
        return [rule.content_type for rule in self._rules]

    def classify(self, filename: str) -> str:
        return determine_content_type(filename, self._rules)
