"""
Value Objects for Domain Layer.

Hook results and the context handed to extension-point callbacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional


class OutputBuffer:
    """Append-only markup accumulator."""

    def __init__(self, initial: str = "") -> None:
        self._parts: List[str] = [initial] if initial else []

    def add_html(self, html: str) -> None:
        """Append markup."""
        if html:
            self._parts.append(html)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return sum(len(p) for p in self._parts)

    def __str__(self) -> str:
        return self.getvalue()

    def __repr__(self) -> str:
        return f"OutputBuffer(parts={len(self._parts)}, length={len(self)})"


class HookResult(str, Enum):
    """Outcome of an extension-point callback or of a whole dispatch."""

    CONTINUE = "continue"  # Run the default behavior
    STOP = "stop"  # Default behavior is suppressed

    @classmethod
    def coerce(cls, value: Any) -> "HookResult":
        """
        Normalize a callback return value.

        None and True mean CONTINUE, False means STOP.

        Raises:
            TypeError: For any other return value
        """
        if isinstance(value, HookResult):
            return value
        if value is None or value is True:
            return cls.CONTINUE
        if value is False:
            return cls.STOP
        raise TypeError(
            f"Hook callbacks must return HookResult, bool or None, got {value!r}"
        )

    @property
    def should_continue(self) -> bool:
        return self is HookResult.CONTINUE


@dataclass
class HookContext:
    """
    Context passed to every extension-point callback.

    Attributes:
        point: Name of the extension point being dispatched
        subject: The page or viewer instance the point fires for
        output: Accumulator callbacks may append markup to
            (section-level points only)
    """

    point: str
    subject: Any
    output: Optional[OutputBuffer] = None


# Signature of a registered callback
HookCallback = Callable[[HookContext], Any]
