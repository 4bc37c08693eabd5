"""
In-Memory Category Store.

A category link table held in memory, for development and testing.
Implements both the membership query of the category viewer and the
intersection query of the categoriesonanswers module.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from flexible_category.domain.entities import (
    CategoryLinkRow,
    CategoryMember,
    Namespace,
    PagingWindow,
    Title,
)


@dataclass(frozen=True)
class _Link:
    page_id: int
    category_key: str
    sort_key: str
    timestamp: datetime


class InMemoryCategoryStore:
    """Pages and their category links, kept in dictionaries."""

    def __init__(self, base_time: Optional[datetime] = None) -> None:
        """
        Initialize empty store.

        Args:
            base_time: Timestamp given to the first link added without
                one; each further link is one second later
        """
        self._pages: Dict[int, Title] = {}
        self._ids: Dict[str, int] = {}
        self._links: List[_Link] = []
        self._clock = base_time or datetime(2009, 11, 20)
        self.query_count = 0

    def add_page(self, title: Title) -> int:
        """Add a page (idempotent) and return its id."""
        key = title.prefixed_db_key
        if key not in self._ids:
            page_id = len(self._ids) + 1
            self._ids[key] = page_id
            self._pages[page_id] = title
        return self._ids[key]

    def add_link(
        self,
        page: Title,
        category: str,
        sort_key: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> None:
        """
        Put a page into a category.

        Args:
            page: Member page
            category: Category name, with or without "Category:" prefix
            sort_key: Listing sort key (defaults to the prefixed title)
            timestamp: Link time (defaults to an increasing clock)
        """
        page_id = self.add_page(page)
        if timestamp is None:
            timestamp = self._clock
            self._clock += timedelta(seconds=1)
        self._links.append(
            _Link(
                page_id=page_id,
                category_key=_category_key(category),
                sort_key=sort_key or page.prefixed_text,
                timestamp=timestamp,
            )
        )

    def fetch_members(
        self,
        category: Title,
        window: PagingWindow,
        limit: int,
    ) -> List[CategoryMember]:
        """Members of a category in query order, at most limit + 1."""
        self.query_count += 1
        links = [link for link in self._links if link.category_key == category.db_key]

        if window.from_key:
            links = [link for link in links if link.sort_key >= window.from_key]
            links.sort(key=lambda link: link.sort_key)
        elif window.until_key:
            links = [link for link in links if link.sort_key < window.until_key]
            links.sort(key=lambda link: link.sort_key, reverse=True)
        else:
            links.sort(key=lambda link: link.sort_key)

        return [
            CategoryMember(
                title=self._pages[link.page_id],
                sort_key=link.sort_key,
                timestamp=link.timestamp,
            )
            for link in links[: limit + 1]
        ]

    def select_status_intersection(
        self,
        category_key: str,
        status_key: str,
        limit: int,
    ) -> List[CategoryLinkRow]:
        """Links of category_key whose page is also in status_key, newest first."""
        self.query_count += 1
        in_status = {link.page_id for link in self._links if link.category_key == status_key}
        rows = [
            link
            for link in self._links
            if link.category_key == category_key and link.page_id in in_status
        ]
        rows.sort(key=lambda link: link.timestamp, reverse=True)
        return [
            CategoryLinkRow(page_id=link.page_id, sort_key=link.sort_key, timestamp=link.timestamp)
            for link in rows[:limit]
        ]


def _category_key(category: str) -> str:
    title = Title.new_from_text(category, default_namespace=Namespace.CATEGORY)
    if title is None or not title.is_category:
        raise ValueError(f"Not a valid category name: {category!r}")
    return title.db_key
