"""
Hook Dispatcher - Extension Point Fan-Out.

Runs the callbacks registered under an extension point in registration
order. The first callback returning STOP ends the dispatch and the
point's result is STOP; otherwise the result is CONTINUE. Callback
exceptions are not caught.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from flexible_category.domain.value_objects import HookContext, HookResult, OutputBuffer
from flexible_category.registry.hook_registry import HookRegistryProtocol

logger = logging.getLogger(__name__)


class HookDispatcher:
    """Stateless fan-out over a hook registry."""

    def __init__(self, registry: HookRegistryProtocol) -> None:
        self.registry = registry

    def run(
        self,
        point: str,
        subject: Any,
        output: Optional[OutputBuffer] = None,
    ) -> HookResult:
        """
        Dispatch an extension point.

        Args:
            point: Extension point name
            subject: Page or viewer the point fires for
            output: Accumulator callbacks may append to

        Returns:
            STOP if a callback stopped the dispatch, else CONTINUE
        """
        hooks = self.registry.get_hooks(point)
        if not hooks:
            return HookResult.CONTINUE

        context = HookContext(point=point, subject=subject, output=output)
        for info in hooks:
            result = HookResult.coerce(info.callback(context))
            if result is HookResult.STOP:
                logger.debug(f"{point}: stopped by {info.name}")
                return HookResult.STOP

        logger.debug(f"{point}: {len(hooks)} hooks continued")
        return HookResult.CONTINUE
