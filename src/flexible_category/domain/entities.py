"""
Core Domain Entities.

This module defines the fundamental entities of the category page domain:
titles and namespaces, category members, the paging window and the
membership state a viewer fills once per request.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Dict, Iterable, List, Optional
from urllib.parse import quote

from pydantic import BaseModel, Field


class Namespace(IntEnum):
    """Namespace identifiers of the page store."""

    MAIN = 0
    TALK = 1
    USER = 2
    USER_TALK = 3
    PROJECT = 4
    PROJECT_TALK = 5
    FILE = 6
    FILE_TALK = 7
    MEDIAWIKI = 8
    MEDIAWIKI_TALK = 9
    TEMPLATE = 10
    TEMPLATE_TALK = 11
    HELP = 12
    HELP_TALK = 13
    CATEGORY = 14
    CATEGORY_TALK = 15


NAMESPACE_NAMES: Dict[Namespace, str] = {
    Namespace.MAIN: "",
    Namespace.TALK: "Talk",
    Namespace.USER: "User",
    Namespace.USER_TALK: "User talk",
    Namespace.PROJECT: "Project",
    Namespace.PROJECT_TALK: "Project talk",
    Namespace.FILE: "File",
    Namespace.FILE_TALK: "File talk",
    Namespace.MEDIAWIKI: "MediaWiki",
    Namespace.MEDIAWIKI_TALK: "MediaWiki talk",
    Namespace.TEMPLATE: "Template",
    Namespace.TEMPLATE_TALK: "Template talk",
    Namespace.HELP: "Help",
    Namespace.HELP_TALK: "Help talk",
    Namespace.CATEGORY: "Category",
    Namespace.CATEGORY_TALK: "Category talk",
}

# Lower-cased prefix -> namespace, including legacy aliases
_PREFIXES: Dict[str, Namespace] = {
    name.lower(): ns for ns, name in NAMESPACE_NAMES.items() if name
}
_PREFIXES["image"] = Namespace.FILE
_PREFIXES["image talk"] = Namespace.FILE_TALK

_ILLEGAL_TITLE_CHARS = re.compile(r"[#<>\[\]|{}]")
_WHITESPACE = re.compile(r"[ _]+")

DEFAULT_CONTENT_NAMESPACES = frozenset({Namespace.MAIN})


class Title(BaseModel):
    """A resolved page title: namespace plus display text."""

    namespace: int = Field(default=Namespace.MAIN, description="Namespace id")
    text: str = Field(..., min_length=1, description="Title text without prefix")

    model_config = {"frozen": True}

    @classmethod
    def new_from_text(
        cls,
        text: Optional[str],
        default_namespace: int = Namespace.MAIN,
    ) -> Optional["Title"]:
        """
        Resolve user-supplied text into a Title.

        A known namespace prefix ("Category:", "File:", "Image:", ...)
        overrides the default namespace. A leading colon selects the main
        namespace before any prefix is read. Underscores and runs of
        spaces collapse to single spaces and the first letter is uppercased.

        Args:
            text: Raw title text, possibly prefixed
            default_namespace: Namespace used when no prefix is present

        Returns:
            Title, or None when the text is empty or not a legal title
        """
        if text is None:
            return None

        normalized = _WHITESPACE.sub(" ", text).strip()
        if not normalized or _ILLEGAL_TITLE_CHARS.search(normalized):
            return None

        namespace = default_namespace
        if normalized.startswith(":"):
            namespace = Namespace.MAIN
            normalized = normalized[1:].strip()
            if not normalized:
                return None

        if ":" in normalized:
            prefix, rest = normalized.split(":", 1)
            ns = _PREFIXES.get(prefix.strip().lower())
            if ns is not None:
                namespace = ns
                normalized = rest.strip()
                if not normalized:
                    return None

        normalized = normalized[0].upper() + normalized[1:]
        return cls(namespace=int(namespace), text=normalized)

    @property
    def db_key(self) -> str:
        """Storage form of the text (spaces as underscores)."""
        return self.text.replace(" ", "_")

    @property
    def namespace_name(self) -> str:
        """Canonical prefix of the namespace, empty for the main namespace."""
        try:
            return NAMESPACE_NAMES[Namespace(self.namespace)]
        except ValueError:
            return ""

    @property
    def prefixed_text(self) -> str:
        """Display form including the namespace prefix."""
        prefix = self.namespace_name
        return f"{prefix}:{self.text}" if prefix else self.text

    @property
    def prefixed_db_key(self) -> str:
        return self.prefixed_text.replace(" ", "_")

    @property
    def is_category(self) -> bool:
        return self.namespace == Namespace.CATEGORY

    @property
    def is_file(self) -> bool:
        return self.namespace == Namespace.FILE

    def is_content_page(
        self, content_namespaces: Iterable[int] = DEFAULT_CONTENT_NAMESPACES
    ) -> bool:
        """Check whether the title lives in one of the content namespaces."""
        return self.namespace in set(content_namespaces)

    def local_url(self, article_path: str = "/wiki/{title}", query: str = "") -> str:
        """Build a local URL for the title."""
        url = article_path.format(title=quote(self.prefixed_db_key, safe=":/"))
        if query:
            url += ("&" if "?" in url else "?") + query
        return url

    def __str__(self) -> str:
        return self.prefixed_text


class PagingWindow(BaseModel):
    """Optional (from, until) sort-key cursors bounding a category slice."""

    from_key: Optional[str] = Field(default=None, alias="from")
    until_key: Optional[str] = Field(default=None, alias="until")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def is_bounded(self) -> bool:
        return bool(self.from_key) or bool(self.until_key)


class CategoryMember(BaseModel):
    """A single entry of a category listing."""

    title: Title
    sort_key: str = Field(..., description="Key the listing is ordered by")
    timestamp: Optional[datetime] = Field(
        default=None, description="When the page was added to the category"
    )

    model_config = {"frozen": True}

    @classmethod
    def for_title(
        cls,
        title: Title,
        sort_key: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> "CategoryMember":
        """Build a member; the sort key defaults to the prefixed title."""
        return cls(title=title, sort_key=sort_key or title.prefixed_text, timestamp=timestamp)

    @property
    def start_char(self) -> str:
        """
        Heading character the member is grouped under.

        With the default sort key the namespace prefix is ignored.
        """
        key = self.title.text if self.sort_key == self.title.prefixed_text else self.sort_key
        return key[:1].upper() if key else " "


class CategoryLinkRow(BaseModel):
    """Row of the status intersection query."""

    page_id: int
    sort_key: str
    timestamp: datetime

    model_config = {"frozen": True}


class MembershipFinalisedError(RuntimeError):
    """Raised when a finalised membership state is mutated."""


@dataclass
class CategoryMembership:
    """
    Membership of one category, partitioned into subcategories, pages
    and media.

    Filled once by the viewer's query step and then finalised; any
    mutation after finalisation raises MembershipFinalisedError.
    """

    subcategories: List[CategoryMember] = field(default_factory=list)
    pages: List[CategoryMember] = field(default_factory=list)
    media: List[CategoryMember] = field(default_factory=list)
    next_page: Optional[str] = None
    finalised: bool = False

    def add_subcategory(self, member: CategoryMember) -> None:
        self._check_mutable()
        self.subcategories.append(member)

    def add_page(self, member: CategoryMember) -> None:
        self._check_mutable()
        self.pages.append(member)

    def add_media(self, member: CategoryMember) -> None:
        self._check_mutable()
        self.media.append(member)

    def set_next_page(self, sort_key: Optional[str]) -> None:
        self._check_mutable()
        self.next_page = sort_key

    def finalise(self, flip: bool = False) -> None:
        """
        Freeze the state.

        Args:
            flip: Reverse every partition (entries were fetched descending)
        """
        self._check_mutable()
        if flip:
            self.subcategories.reverse()
            self.pages.reverse()
            self.media.reverse()
        self.finalised = True

    @property
    def total(self) -> int:
        return len(self.subcategories) + len(self.pages) + len(self.media)

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def _check_mutable(self) -> None:
        if self.finalised:
            raise MembershipFinalisedError(
                "Category membership is finalised and cannot be modified"
            )
