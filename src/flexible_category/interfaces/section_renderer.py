"""
Section Renderer Protocol.

The viewer does not inherit its default section markup; it holds a
section renderer and asks it for the default rendering of each section.
Plugins that need a different default for every page can supply their
own renderer instead of hooking each section.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flexible_category.domain.entities import (
        CategoryMembership,
        PagingWindow,
        Title,
    )


class ViewerStateProtocol(Protocol):
    """What a section renderer may read from the viewer."""

    @property
    def title(self) -> Title:
        ...

    @property
    def window(self) -> PagingWindow:
        ...

    @property
    def limit(self) -> int:
        ...

    @property
    def show_gallery(self) -> bool:
        ...

    @property
    def membership(self) -> CategoryMembership:
        ...


@runtime_checkable
class SectionRendererProtocol(Protocol):
    """Default rendering of each section."""

    def category_top(self, state: ViewerStateProtocol) -> str:
        ...

    def subcategory_section(self, state: ViewerStateProtocol) -> str:
        ...

    def pages_section(self, state: ViewerStateProtocol) -> str:
        ...

    def image_section(self, state: ViewerStateProtocol) -> str:
        ...

    def other_section(self, state: ViewerStateProtocol) -> str:
        ...

    def category_bottom(self, state: ViewerStateProtocol) -> str:
        ...

    def empty_category(self, state: ViewerStateProtocol) -> str:
        """Canonical markup for a category with nothing to show."""
        ...
