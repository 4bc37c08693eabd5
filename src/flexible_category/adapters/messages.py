"""
Message Catalog.

Interface messages with English defaults. Texts use str.format
placeholders; a key with a "-one" variant uses it when count is 1.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

DEFAULT_MESSAGES: Dict[str, str] = {
    "subcategories": "Subcategories",
    "category-subcat-count": "This category has the following {count} subcategories.",
    "category-subcat-count-one": "This category has only the following subcategory.",
    "category-header": 'Pages in category "{title}"',
    "category-article-count": "The following {count} pages are in this category.",
    "category-article-count-one": "This category contains only the following page.",
    "category-media-header": 'Media in category "{title}"',
    "category-file-count": "The following {count} files are in this category.",
    "category-file-count-one": "This category contains only the following file.",
    "category-empty": "<p><i>This category currently contains no pages or media.</i></p>",
    "listingcontinuesabbrev": "cont.",
    "prevn": "previous {count}",
    "nextn": "next {count}",
    "noarticletext": "There is currently no text in this page.",
}


class MessageCatalog:
    """Default messages with per-site overrides."""

    def __init__(self, overrides: Optional[Mapping[str, str]] = None) -> None:
        """
        Initialize catalog.

        Args:
            overrides: Message key -> text replacing the defaults
        """
        self._messages: Dict[str, str] = dict(DEFAULT_MESSAGES)
        if overrides:
            self._messages.update(overrides)

    def has(self, key: str) -> bool:
        return key in self._messages

    def text(self, key: str, **params: Any) -> str:
        """
        Message text with placeholders filled in.

        Unknown keys come back as the raw key in angle brackets; callers
        escape message text before putting it into markup.
        """
        template = self._messages.get(key)
        if template is None:
            return f"<{key}>"
        return template.format(**params) if params else template

    def count(self, key: str, count: int, **params: Any) -> str:
        """Message chosen by count, with {count} available to the text."""
        singular = f"{key}-one"
        if count == 1 and singular in self._messages:
            key = singular
        return self.text(key, count=count, **params)
