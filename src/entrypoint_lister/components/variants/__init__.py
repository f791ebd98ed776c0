"""
Variants component - Discover pre-compressed siblings of output files.
"""

from .component import (
    DEFAULT_VARIANTS,
    probe_identity,
    probe_variant,
    probe_variants,
    variant_filename,
)
from .models import ProbeStatus, VariantProbe

__all__ = [
    # Entry points
    "probe_identity",
    "probe_variant",
    "probe_variants",
    # Helper functions
    "variant_filename",
    # Configuration
    "DEFAULT_VARIANTS",
    # Models
    "ProbeStatus",
    "VariantProbe",
]
