"""
Build lifecycle hooks - Run the entrypoint lister when a build completes.

The plugin registers once, before the build starts, on the host's "done"
hook. When the hook fires it builds the manifest for the completed build and
writes it. Errors propagate to whatever fired the hook.

Key behaviors:
- One manifest per completed build, recomputed from scratch
- Options are validated when the plugin is created
- Hosts without their own hook registry can use BuildHooks
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from entrypoint_lister.adapters.fs.output_dir import LocalOutputDirectory
from entrypoint_lister.components.content_types import ContentTypeClassifier
from entrypoint_lister.components.entrypoints import build_manifest
from entrypoint_lister.components.manifest import resolve_output_path, write_manifest
from entrypoint_lister.core.entities import BuildCompletedEvent
from entrypoint_lister.core.ports import OutputDirectoryPort
from entrypoint_lister.rules import ListerOptions, parse_options

logger = logging.getLogger(__name__)

PLUGIN_NAME = "EntrypointListerPlugin"

DoneCallback = Callable[[BuildCompletedEvent], Any]


# --- Host Hook Protocols ---


class TapableHook(Protocol):
    """A host hook that plugins tap into."""

    def tap(self, name: str, callback: DoneCallback) -> None: ...


class BuildHooksPort(Protocol):
    """Host hooks the plugin needs: just "done"."""

    @property
    def done(self) -> TapableHook: ...


# --- In-process Hook Registry ---


class Hook:
    """Minimal synchronous hook: callbacks run in registration order."""

    def __init__(self) -> None:
        self._taps: list[tuple[str, DoneCallback]] = []

    def tap(self, name: str, callback: DoneCallback) -> None:
        self._taps.append((name, callback))

    @property
    def taps(self) -> list[str]:
        return [name for name, _ in self._taps]

    def call(self, event: BuildCompletedEvent) -> list[Any]:
        return [callback(event) for _, callback in self._taps]


@dataclass
class BuildHooks:
    """Hook registry for hosts that don't bring their own."""

    done: Hook = field(default_factory=Hook)


# --- Plugin ---


class EntrypointListerPlugin:
    """
    Lifecycle participant that writes the entrypoint manifest.

    Accepts ListerOptions or a plain mapping of options (camelCase keys as
    used by the webpack plugin, or snake_case).
    """

    def __init__(
        self,
        options: ListerOptions | Mapping[str, Any] | None = None,
        *,
        directory_factory: Callable[[Path], OutputDirectoryPort] = LocalOutputDirectory,
    ) -> None:
        if options is None:
            options = ListerOptions()
        elif not isinstance(options, ListerOptions):
            options = parse_options(dict(options))

        self.options = options
        self.classifier = ContentTypeClassifier(options.content_type_rules())
        self.variants = dict(options.variants)
        self._directory_factory = directory_factory

    def apply(self, hooks: BuildHooksPort) -> None:
        """Register on the host's done hook."""
        hooks.done.tap(PLUGIN_NAME, self.on_done)

    def output_file(self, event: BuildCompletedEvent) -> Path:
        return resolve_output_path(
            event.output_path,
            output_dir=self.options.output_dir,
            output_filename=self.options.output_filename,
        )

    def on_done(self, event: BuildCompletedEvent) -> Path:
        """
        Build and write the manifest for a completed build.

        Returns:
            Path of the written manifest file.
        """
        directory = self._directory_factory(event.output_path)
        manifest = build_manifest(
            event,
            directory=directory,
            classifier=self.classifier,
            variants=self.variants,
        )
        return write_manifest(manifest, self.output_file(event))
