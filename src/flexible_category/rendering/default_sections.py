"""
Default Section Renderer.

Produces the stock markup of each category page section from the
viewer state: paging links at top and bottom, grouped lists of
subcategories and pages, and a gallery of media files.

Lists of more than SHORT_LIST_CUTOFF entries are laid out in three
columns; shorter lists are a single grouped list.
"""

from __future__ import annotations

import html
from typing import List, Optional, Sequence, Tuple
from urllib.parse import urlencode

from flexible_category.adapters.messages import MessageCatalog
from flexible_category.config.models import CategoryPageConfig
from flexible_category.domain.entities import CategoryMember, Title
from flexible_category.interfaces.page_io import MessageSourceProtocol
from flexible_category.interfaces.section_renderer import ViewerStateProtocol

SHORT_LIST_CUTOFF = 6
COLUMNS = 3


class DefaultSectionRenderer:
    """Stock rendering of the category page sections."""

    def __init__(
        self,
        messages: Optional[MessageSourceProtocol] = None,
        article_path: str = "/wiki/{title}",
    ) -> None:
        """
        Initialize renderer.

        Args:
            messages: Interface message source
            article_path: URL pattern of pages, with a {title} placeholder
        """
        self.messages = messages or MessageCatalog()
        self.article_path = article_path

    @classmethod
    def from_config(cls, config: CategoryPageConfig) -> "DefaultSectionRenderer":
        """Renderer using the configured message overrides and article path."""
        return cls(MessageCatalog(config.messages), config.paths.article_path)

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def category_top(self, state: ViewerStateProtocol) -> str:
        links = self.category_bottom(state)
        if links == "":
            return ""
        return '<br style="clear:both;"/>\n' + links

    def subcategory_section(self, state: ViewerStateProtocol) -> str:
        members = state.membership.subcategories
        if not members:
            return ""
        heading = html.escape(self.messages.text("subcategories"))
        count = html.escape(self.messages.count("category-subcat-count", len(members)))
        items = [(m.start_char, self._link(m.title, m.title.text)) for m in members]
        return (
            '<div id="mw-subcategories">\n'
            f"<h2>{heading}</h2>\n"
            f"<p>{count}</p>\n"
            f"{self.format_list(items)}\n"
            "</div>"
        )

    def pages_section(self, state: ViewerStateProtocol) -> str:
        members = state.membership.pages
        if not members:
            return ""
        heading = html.escape(
            self.messages.text("category-header", title=state.title.text)
        )
        count = html.escape(self.messages.count("category-article-count", len(members)))
        items = [(m.start_char, self._link(m.title, m.title.prefixed_text)) for m in members]
        return (
            '<div id="mw-pages">\n'
            f"<h2>{heading}</h2>\n"
            f"<p>{count}</p>\n"
            f"{self.format_list(items)}\n"
            "</div>"
        )

    def image_section(self, state: ViewerStateProtocol) -> str:
        members = state.membership.media
        if not state.show_gallery or not members:
            return ""
        heading = html.escape(
            self.messages.text("category-media-header", title=state.title.text)
        )
        count = html.escape(self.messages.count("category-file-count", len(members)))
        return (
            '<div id="mw-category-media">\n'
            f"<h2>{heading}</h2>\n"
            f"<p>{count}</p>\n"
            f"{self._gallery(members)}\n"
            "</div>"
        )

    def other_section(self, state: ViewerStateProtocol) -> str:
        return ""

    def category_bottom(self, state: ViewerStateProtocol) -> str:
        window = state.window
        next_page = state.membership.next_page
        if window.until_key:
            return self.paging_links(state, next_page, window.until_key)
        if next_page or window.from_key:
            return self.paging_links(state, window.from_key, next_page)
        return ""

    def empty_category(self, state: ViewerStateProtocol) -> str:
        return self.messages.text("category-empty")

    # ------------------------------------------------------------------
    # Building blocks
    # ------------------------------------------------------------------

    def paging_links(
        self,
        state: ViewerStateProtocol,
        first: Optional[str],
        last: Optional[str],
    ) -> str:
        """
        "(previous N | next N)" navigation.

        Args:
            first: Sort key the previous page ends before, if any
            last: Sort key the next page starts at, if any
        """
        limit = state.limit
        prev_text = html.escape(self.messages.text("prevn", count=limit))
        next_text = html.escape(self.messages.text("nextn", count=limit))

        if first:
            prev_link = self._link(state.title, prev_text, {"until": first}, escaped=True)
        else:
            prev_link = prev_text
        if last:
            next_link = self._link(state.title, next_text, {"from": last}, escaped=True)
        else:
            next_link = next_text

        return f"({prev_link} | {next_link})"

    def format_list(self, items: Sequence[Tuple[str, str]]) -> str:
        """Lay out (start char, link) items as a short list or in columns."""
        if len(items) > SHORT_LIST_CUTOFF:
            return self.column_list(items)
        return self.short_list(items)

    def short_list(self, items: Sequence[Tuple[str, str]]) -> str:
        parts: List[str] = []
        for char, group in _group_by_char(items):
            parts.append(f"<h3>{html.escape(char)}</h3>\n<ul>")
            parts.extend(f"<li>{link}</li>" for link in group)
            parts.append("</ul>")
        return "\n".join(parts)

    def column_list(self, items: Sequence[Tuple[str, str]]) -> str:
        """Three-column table; a group split across columns is headed "X cont."."""
        chunk = -(-len(items) // COLUMNS)
        cont = html.escape(self.messages.text("listingcontinuesabbrev"))

        cells: List[str] = []
        prev_char: Optional[str] = None
        for start in range(0, len(items), chunk):
            column = items[start : start + chunk]
            parts: List[str] = ["<td>"]
            for i, (char, group) in enumerate(_group_by_char(column)):
                heading = html.escape(char)
                if i == 0 and char == prev_char:
                    heading = f"{heading} {cont}"
                parts.append(f"<h3>{heading}</h3>\n<ul>")
                parts.extend(f"<li>{link}</li>" for link in group)
                parts.append("</ul>")
                prev_char = char
            parts.append("</td>")
            cells.append("\n".join(parts))

        return (
            '<table width="100%"><tr valign="top">\n'
            + "\n".join(cells)
            + "\n</tr></table>"
        )

    def _gallery(self, members: Sequence[CategoryMember]) -> str:
        boxes = "\n".join(
            f'<li class="gallerybox">{self._link(m.title, m.title.text)}</li>'
            for m in members
        )
        return f'<ul class="gallery">\n{boxes}\n</ul>'

    def _link(
        self,
        title: Title,
        text: str,
        query: Optional[dict] = None,
        escaped: bool = False,
    ) -> str:
        href = title.local_url(self.article_path, urlencode(query) if query else "")
        label = text if escaped else html.escape(text)
        return (
            f'<a href="{html.escape(href)}" '
            f'title="{html.escape(title.prefixed_text)}">{label}</a>'
        )


def _group_by_char(
    items: Sequence[Tuple[str, str]],
) -> List[Tuple[str, List[str]]]:
    groups: List[Tuple[str, List[str]]] = []
    for char, link in items:
        if groups and groups[-1][0] == char:
            groups[-1][1].append(link)
        else:
            groups.append((char, [link]))
    return groups
