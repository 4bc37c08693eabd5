"""
Shared test helpers.
"""

from __future__ import annotations

from typing import List, Optional

from flexible_category.domain.entities import Namespace, Title
from flexible_category.domain.value_objects import HookContext, HookResult


def title(text: str, namespace: int = Namespace.MAIN) -> Title:
    """Resolve a title, failing the test if the text is not a legal title."""
    resolved = Title.new_from_text(text, namespace)
    assert resolved is not None
    return resolved


class RecordingHook:
    """Hook callback that records calls and optionally appends markup."""

    def __init__(
        self,
        result: object = HookResult.CONTINUE,
        append: str = "",
        calls: Optional[List[str]] = None,
        label: str = "",
    ) -> None:
        self.result = result
        self.append = append
        self.contexts: List[HookContext] = []
        self.calls = calls
        self.label = label

    def __call__(self, context: HookContext) -> object:
        self.contexts.append(context)
        if self.calls is not None:
            self.calls.append(self.label or context.point)
        if self.append and context.output is not None:
            context.output.add_html(self.append)
        return self.result

    @property
    def call_count(self) -> int:
        return len(self.contexts)
