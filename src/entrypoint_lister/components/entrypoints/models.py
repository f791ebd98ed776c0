"""
Entrypoints component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from entrypoint_lister.core.entities import BuildCompletedEvent, Manifest


@dataclass(frozen=True)
class BuildManifestInput:
    """Input for building a manifest from a completed build."""

    event: BuildCompletedEvent


@dataclass(frozen=True)
class BuildManifestOutput:
    """Output from building a manifest."""

    manifest: Manifest
    files_recorded: int
    references: int
