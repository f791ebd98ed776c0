"""Build lifecycle hooks."""

from .plugin import (
    PLUGIN_NAME,
    BuildHooks,
    BuildHooksPort,
    EntrypointListerPlugin,
    Hook,
    TapableHook,
)

__all__ = [
    "PLUGIN_NAME",
    "BuildHooks",
    "BuildHooksPort",
    "EntrypointListerPlugin",
    "Hook",
    "TapableHook",
]
