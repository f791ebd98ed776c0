"""Exceptions raised by the entrypoint lister."""

from __future__ import annotations


class EntrypointListerError(Exception):
    """Base class for entrypoint lister errors."""


class OptionsError(EntrypointListerError, ValueError):
    """Raised when lister options fail to parse or validate."""


class BuildGraphError(EntrypointListerError, ValueError):
    """Raised when a build graph (e.g. a webpack stats file) is malformed."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
