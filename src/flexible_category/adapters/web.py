"""
Web Adapters.

Minimal stand-ins for the request, output page and article renderer
of a host application. Hosts with their own objects only need to
satisfy the protocols in flexible_category.interfaces.page_io.
"""

from __future__ import annotations

import html
from typing import Dict, Mapping, Optional
from urllib.parse import parse_qsl

from flexible_category.adapters.messages import MessageCatalog
from flexible_category.domain.entities import Title
from flexible_category.domain.value_objects import OutputBuffer

_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


class MappingRequest:
    """Request parameters backed by a mapping."""

    def __init__(self, params: Optional[Mapping[str, str]] = None) -> None:
        self._params: Dict[str, str] = dict(params or {})

    @classmethod
    def from_query_string(cls, query: str) -> "MappingRequest":
        """Parse a query string; the last value of a repeated name wins."""
        return cls(dict(parse_qsl(query.lstrip("?"), keep_blank_values=True)))

    def get_val(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._params.get(name, default)

    def get_bool(self, name: str, default: bool = False) -> bool:
        value = self._params.get(name)
        if value is None:
            return default
        return value.strip().lower() not in _FALSE_VALUES

    def __contains__(self, name: str) -> bool:
        return name in self._params


class OutputPage(OutputBuffer):
    """
    Output sink of one page view.

    Attributes:
        no_gallery: Media members are listed as pages, not as a gallery
    """

    def __init__(self, no_gallery: bool = False) -> None:
        super().__init__()
        self.no_gallery = no_gallery


class StaticArticleRenderer:
    """Renders page bodies from a title -> HTML mapping."""

    def __init__(
        self,
        pages: Optional[Mapping[str, str]] = None,
        messages: Optional[MessageCatalog] = None,
        category_preamble: str = "",
    ) -> None:
        """
        Initialize renderer.

        Args:
            pages: Prefixed title text -> body HTML
            messages: Catalog for the missing-page notice
            category_preamble: Markup placed before category page bodies
        """
        self._pages: Dict[str, str] = dict(pages or {})
        self._messages = messages or MessageCatalog()
        self._category_preamble = category_preamble

    def set_page(self, title: Title, body_html: str) -> None:
        self._pages[title.prefixed_text] = body_html

    def render(self, title: Title) -> str:
        body = self._pages.get(title.prefixed_text)
        if body is None:
            notice = html.escape(self._messages.text("noarticletext"))
            return f'<div class="noarticletext">{notice}</div>\n'
        return f'<div class="mw-content-text">{body}</div>\n'

    def open_show_category(self, title: Title) -> str:
        return self._category_preamble
