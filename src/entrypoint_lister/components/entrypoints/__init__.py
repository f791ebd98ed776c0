"""
Entrypoints component - Assemble the manifest from the build graph.
"""

from .component import build_manifest, run
from .models import BuildManifestInput, BuildManifestOutput

__all__ = [
    # Entry points
    "run",
    "build_manifest",
    # Models
    "BuildManifestInput",
    "BuildManifestOutput",
]
