"""
Content types component models.

Matchers test a relative output filename; rules pair a content type with a
matcher and are evaluated in order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol


class FilenameMatcher(Protocol):
    """Anything that can test a filename."""

    def test(self, filename: str) -> bool: ...


@dataclass(frozen=True)
class SuffixMatcher:
    """Matches filenames ending with a fixed suffix."""

    suffix: str

    def test(self, filename: str) -> bool:
        return filename.endswith(self.suffix)


@dataclass(frozen=True)
class PatternMatcher:
    """Matches filenames containing a regular-expression match."""

    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, pattern: str) -> PatternMatcher:
        return cls(re.compile(pattern))

    def test(self, filename: str) -> bool:
        return self.pattern.search(filename) is not None


@dataclass(frozen=True)
class ContentTypeRule:
    """A content type and the matcher that selects it."""

    content_type: str
    matcher: FilenameMatcher
