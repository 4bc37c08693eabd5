"""
Registry Module - Extension Point Management.

This module provides the process-wide registry of extension point
callbacks and the startup code that fills it from plugins.

Components:
    - HookRegistry: Central registry for extension point callbacks
    - HookInfo: Metadata about registered callbacks
    - hook_points: Names of all extension points
    - load_plugins / build_registry: Startup composition
"""

from flexible_category.registry import hook_points
from flexible_category.registry.hook_registry import (
    HookInfo,
    HookRegistry,
    HookRegistryProtocol,
    RegistryFrozenError,
)
from flexible_category.registry.plugins import (
    PluginLoadError,
    build_registry,
    load_plugins,
)

__all__ = [
    "HookInfo",
    "HookRegistry",
    "HookRegistryProtocol",
    "PluginLoadError",
    "RegistryFrozenError",
    "build_registry",
    "hook_points",
    "load_plugins",
]
