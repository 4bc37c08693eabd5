"""
Hook Registry - Extension Point Callback Management.

This module provides a thread-safe registry mapping extension point
names to ordered callback lists. The registry is populated during
startup composition and then frozen; from that moment it is read-only
and can be shared by every request.

Usage:
    registry = HookRegistry()
    registry.register(PAGES_SECTION, add_banner, name="banner")
    registry.register(CLOSE_SHOW_CATEGORY, reorder_sections)
    registry.freeze()

    # Per request
    callbacks = registry.get_callbacks(PAGES_SECTION)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, List, Optional, Protocol, Tuple

from flexible_category.domain.value_objects import HookCallback

logger = logging.getLogger(__name__)


class RegistryFrozenError(RuntimeError):
    """Raised when the registry is modified after freeze()."""


@dataclass(frozen=True)
class HookInfo:
    """Metadata about a registered callback."""

    point: str
    name: str
    callback: HookCallback
    description: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "point": self.point,
            "name": self.name,
            "description": self.description,
            "tags": list(self.tags),
        }


class HookRegistryProtocol(Protocol):
    """Read side of a hook registry, as used by the dispatcher."""

    def get_hooks(self, point: str) -> Tuple[HookInfo, ...]:
        """Get registered hooks for a point, in registration order."""
        ...


class HookRegistry:
    """
    Thread-safe registry of extension point callbacks.

    Supports:
        - Any number of callbacks per point, run in registration order
        - Named callbacks for introspection and unregistration
        - Freezing once startup composition is done
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._hooks: Dict[str, List[HookInfo]] = {}
        self._lock = RLock()
        self._frozen = False
        logger.debug("HookRegistry initialized")

    def register(
        self,
        point: str,
        callback: HookCallback,
        name: Optional[str] = None,
        description: str = "",
        tags: Optional[List[str]] = None,
    ) -> HookInfo:
        """
        Register a callback under an extension point.

        Args:
            point: Extension point name
            callback: Callable taking a HookContext
            name: Unique name within the point (defaults to the callable name)
            description: Optional description
            tags: Optional tags for categorization

        Returns:
            The stored HookInfo

        Raises:
            RegistryFrozenError: If the registry is frozen
            ValueError: If the name is already registered under the point
            TypeError: If callback is not callable
        """
        if not callable(callback):
            raise TypeError(f"Hook for '{point}' is not callable: {callback!r}")

        hook_name = name or getattr(callback, "__qualname__", repr(callback))

        with self._lock:
            self._check_not_frozen()
            hooks = self._hooks.setdefault(point, [])
            if any(h.name == hook_name for h in hooks):
                raise ValueError(
                    f"Hook '{hook_name}' is already registered for '{point}'. "
                    f"Pass a distinct name or unregister() first."
                )

            info = HookInfo(
                point=point,
                name=hook_name,
                callback=callback,
                description=description,
                tags=tuple(tags or ()),
            )
            hooks.append(info)
            logger.info(f"Registered hook: {point} -> {hook_name}")
            return info

    def unregister(self, point: str, name: str) -> bool:
        """
        Remove a named callback from a point.

        Returns:
            True if removed, False if not found

        Raises:
            RegistryFrozenError: If the registry is frozen
        """
        with self._lock:
            self._check_not_frozen()
            hooks = self._hooks.get(point, [])
            for i, info in enumerate(hooks):
                if info.name == name:
                    del hooks[i]
                    if not hooks:
                        del self._hooks[point]
                    logger.info(f"Unregistered hook: {point} -> {name}")
                    return True

            logger.warning(f"Cannot unregister: hook '{name}' not found for '{point}'")
            return False

    def get_hooks(self, point: str) -> Tuple[HookInfo, ...]:
        """Get hooks registered under a point, in registration order."""
        with self._lock:
            return tuple(self._hooks.get(point, ()))

    def get_callbacks(self, point: str) -> Tuple[HookCallback, ...]:
        """Get the callables registered under a point."""
        return tuple(info.callback for info in self.get_hooks(point))

    def has_hooks(self, point: str) -> bool:
        with self._lock:
            return bool(self._hooks.get(point))

    def list_all(self) -> Dict[str, List[HookInfo]]:
        """List all registered hooks by point."""
        with self._lock:
            return {point: list(hooks) for point, hooks in self._hooks.items()}

    def freeze(self) -> None:
        """Make the registry read-only."""
        with self._lock:
            if not self._frozen:
                self._frozen = True
                logger.info(
                    f"Hook registry frozen with {self.registered_count} hooks "
                    f"on {len(self._hooks)} points"
                )

    @property
    def frozen(self) -> bool:
        with self._lock:
            return self._frozen

    @property
    def registered_count(self) -> int:
        """Total number of registered callbacks."""
        with self._lock:
            return sum(len(hooks) for hooks in self._hooks.values())

    def clear(self) -> None:
        """Remove all hooks."""
        with self._lock:
            self._check_not_frozen()
            self._hooks.clear()
            logger.info("Cleared all hooks from registry")

    def _check_not_frozen(self) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                "Hook registry is frozen; register hooks during startup"
            )
