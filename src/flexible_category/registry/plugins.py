"""
Plugin loading and startup composition.

A plugin is a module (or any object) exposing ``register(registry)``.
Plugins are loaded once at startup; the resulting registry is frozen
and shared by all requests.
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Iterable, Optional, Union

from flexible_category.config.models import CategoryPageConfig
from flexible_category.registry.hook_registry import HookRegistry

logger = logging.getLogger(__name__)

PluginRef = Union[str, Any]


class PluginLoadError(ImportError):
    """Raised when a configured plugin cannot be imported or has no register()."""


def load_plugins(registry: HookRegistry, plugins: Iterable[PluginRef]) -> int:
    """
    Let each plugin register its hooks.

    Args:
        registry: Registry to populate
        plugins: Module paths ("package.module") or plugin objects

    Returns:
        Number of plugins loaded

    Raises:
        PluginLoadError: If a module path cannot be imported or a plugin
            has no callable register()
    """
    loaded = 0
    for ref in plugins:
        plugin = _resolve(ref)
        register = getattr(plugin, "register", None)
        if not callable(register):
            raise PluginLoadError(f"Plugin {ref!r} has no register(registry) function")

        before = registry.registered_count
        register(registry)
        loaded += 1
        logger.info(
            f"Loaded plugin {_plugin_name(ref)}: "
            f"{registry.registered_count - before} hooks"
        )
    return loaded


def build_registry(
    config: Optional[CategoryPageConfig] = None,
    extra_plugins: Iterable[PluginRef] = (),
    freeze: bool = True,
) -> HookRegistry:
    """
    Compose the process-wide registry.

    Args:
        config: Configuration listing plugin modules
        extra_plugins: Additional plugins loaded after the configured ones
        freeze: Freeze the registry when done

    Returns:
        Populated (and by default frozen) HookRegistry
    """
    registry = HookRegistry()
    configured = config.plugins if config else []
    load_plugins(registry, list(configured) + list(extra_plugins))
    if freeze:
        registry.freeze()
    return registry


def _resolve(ref: PluginRef) -> Any:
    if not isinstance(ref, str):
        return ref
    try:
        return importlib.import_module(ref)
    except ImportError as e:
        raise PluginLoadError(f"Cannot import plugin '{ref}': {e}") from e


def _plugin_name(ref: PluginRef) -> str:
    if isinstance(ref, str):
        return ref
    return getattr(ref, "__name__", type(ref).__name__)
