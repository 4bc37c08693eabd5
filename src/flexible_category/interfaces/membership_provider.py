"""
Membership Provider Protocols.

Defines the data access interfaces of the category page pipeline and
of the status-filtered listing query.

The membership provider is responsible for:
    - Fetching the members of one category, ordered by sort key
    - Honoring the paging window (from / until) and the page size

The category link store is responsible for:
    - Intersecting the members of two categories
    - Ordering the intersection by link timestamp, newest first

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Failures propagate to the caller unchanged
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flexible_category.domain.entities import (
        CategoryLinkRow,
        CategoryMember,
        PagingWindow,
        Title,
    )


@runtime_checkable
class MembershipProviderProtocol(Protocol):
    """Abstract interface for category membership queries."""

    def fetch_members(
        self,
        category: Title,
        window: PagingWindow,
        limit: int,
    ) -> List[CategoryMember]:
        """
        Fetch members of a category.

        With ``window.from_key`` set, members with sort key >= from are
        returned ascending. Otherwise with ``window.until_key`` set,
        members with sort key < until are returned descending. Without
        either, all members ascending.

        Args:
            category: The category to list
            window: Paging cursors
            limit: Page size; at most limit + 1 members are returned so
                the caller can detect a following page

        Returns:
            Members in query order
        """
        ...


@runtime_checkable
class CategoryLinkStoreProtocol(Protocol):
    """Abstract interface for the category intersection query."""

    def select_status_intersection(
        self,
        category_key: str,
        status_key: str,
        limit: int,
    ) -> List[CategoryLinkRow]:
        """
        Intersect two categories.

        Args:
            category_key: DB key of the subject category
            status_key: DB key of the status category
            limit: Maximum number of rows

        Returns:
            Links of the subject category whose page is also in the
            status category, newest link first
        """
        ...
