"""
Page I/O Protocols.

Narrow interfaces to the collaborators surrounding a page view: the
article renderer, the output sink, the incoming request and the
message source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flexible_category.domain.entities import Title


@runtime_checkable
class ArticleRendererProtocol(Protocol):
    """Renders the plain content of a page."""

    def render(self, title: Title) -> str:
        """Render the default view of the page body."""
        ...

    def open_show_category(self, title: Title) -> str:
        """Markup placed before the page body of a category page."""
        ...


@runtime_checkable
class OutputSinkProtocol(Protocol):
    """Append-only sink for page markup."""

    def add_html(self, html: str) -> None:
        ...


@runtime_checkable
class RequestProtocol(Protocol):
    """Access to request parameters."""

    def get_val(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a parameter value, or default if absent."""
        ...

    def get_bool(self, name: str, default: bool = False) -> bool:
        """Get a parameter as boolean, or default if absent."""
        ...


@runtime_checkable
class MessageSourceProtocol(Protocol):
    """Localized interface messages."""

    def text(self, key: str, **params: Any) -> str:
        """Message text with {placeholders} filled in."""
        ...

    def count(self, key: str, count: int, **params: Any) -> str:
        """Message text chosen by count (singular / plural)."""
        ...
