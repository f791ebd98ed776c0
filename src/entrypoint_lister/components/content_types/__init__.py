"""
Content types component - Classify output files by filename.
"""

from .component import (
    DEFAULT_CONTENT_TYPE_PATTERNS,
    FALLBACK_CONTENT_TYPE,
    SCRIPT_CONTENT_TYPE,
    STYLESHEET_CONTENT_TYPE,
    ContentTypeClassifier,
    build_rules,
    determine_content_type,
    make_matcher,
)
from .models import (
    ContentTypeRule,
    FilenameMatcher,
    PatternMatcher,
    SuffixMatcher,
)

__all__ = [
    # Entry points
    "ContentTypeClassifier",
    "determine_content_type",
    # Helper functions
    "build_rules",
    "make_matcher",
    # Configuration
    "DEFAULT_CONTENT_TYPE_PATTERNS",
    "FALLBACK_CONTENT_TYPE",
    "SCRIPT_CONTENT_TYPE",
    "STYLESHEET_CONTENT_TYPE",
    # Models
    "ContentTypeRule",
    "FilenameMatcher",
    "PatternMatcher",
    "SuffixMatcher",
]
