"""
Categories On Answers - Status-Filtered Category Listing.

Lists the pages of a category that are also in the answered (or
un-answered) questions category, newest link first.

Example:
    Most recent 10 unanswered questions in [[Category:Muppet Wiki]]:
    ?action=query&list=categoriesonanswers&coatitle=Muppet%20Wiki

Note:
    The limit bounds the intersection query. Rows whose page is not a
    content page are dropped afterwards, so fewer than ``limit`` entries
    can come back even when more matching content pages exist.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, Field

from flexible_category.api.errors import ApiUsageError
from flexible_category.config.models import CategoryPageConfig
from flexible_category.domain.entities import Namespace, Title
from flexible_category.interfaces.membership_provider import CategoryLinkStoreProtocol

logger = logging.getLogger(__name__)

MODULE_NAME = "categoriesonanswers"
PARAM_PREFIX = "coa"
VERSION = "CategoriesOnAnswersQuery: v 1.0"


class CategoriesOnAnswersParams(BaseModel):
    """Validated parameters of one request."""

    title: str = Field(..., description="Which category to enumerate")
    answered: Literal["no", "yes"] = Field(
        default="no", description="Answered or un-answered questions"
    )
    limit: int = Field(default=10, ge=1, description="Maximum number of pages")

    model_config = {"frozen": True}


class CategoriesOnAnswersQuery:
    """List pages in a category AND with given un/answered status."""

    def __init__(
        self,
        store: CategoryLinkStoreProtocol,
        config: Optional[CategoryPageConfig] = None,
    ) -> None:
        """
        Initialize query module.

        Args:
            store: Category link store running the intersection
            config: Status category names, limits, content namespaces
        """
        self.store = store
        self.config = config or CategoryPageConfig()
        self.answered_category = self.config.answers.answered_category
        self.unanswered_category = self.config.answers.unanswered_category

    @property
    def module_name(self) -> str:
        return MODULE_NAME

    def execute(
        self,
        raw_params: Mapping[str, str],
        high_limits: bool = False,
    ) -> Dict[str, Any]:
        """
        Run the query.

        Args:
            raw_params: Request parameters, prefixed ("coatitle", ...)
            high_limits: Caller may use the raised limit

        Returns:
            {"query": {"categoriesonanswers": [{"ns": int, "title": str}, ...]}}

        Raises:
            ApiUsageError: notitle, invalidcategory, unknown_answered,
                badinteger
        """
        params = self.extract_params(raw_params, high_limits)

        category_title = Title.new_from_text(params.title, Namespace.CATEGORY)
        if category_title is None or not category_title.is_category:
            raise ApiUsageError(
                "The category name you entered is not valid", "invalidcategory"
            )

        status_name = (
            self.unanswered_category if params.answered == "no" else self.answered_category
        )
        status_title = Title.new_from_text(status_name, Namespace.CATEGORY)
        if status_title is None or not status_title.is_category:
            raise ApiUsageError(
                "The name of un/answered category is not valid", "invalidcategory"
            )

        rows = self.store.select_status_intersection(
            category_title.db_key, status_title.db_key, params.limit
        )

        content_namespaces = self.config.namespaces.content
        data: List[Dict[str, Any]] = []
        for row in rows:
            title = Title.new_from_text(row.sort_key)
            if title is not None and title.is_content_page(content_namespaces):
                data.append({"ns": int(title.namespace), "title": title.prefixed_text})

        logger.debug(
            f"{MODULE_NAME}: {category_title} x {status_title}: "
            f"{len(rows)} rows, {len(data)} content pages"
        )
        return {"query": {MODULE_NAME: data}}

    def extract_params(
        self,
        raw_params: Mapping[str, str],
        high_limits: bool = False,
    ) -> CategoriesOnAnswersParams:
        """Read and validate the prefixed request parameters."""
        title = raw_params.get(f"{PARAM_PREFIX}title")
        if title is None:
            raise ApiUsageError(f"The {PARAM_PREFIX}title parameter is required", "notitle")

        answered = raw_params.get(f"{PARAM_PREFIX}answered", "no")
        if answered not in ("no", "yes"):
            raise ApiUsageError(
                f"Unrecognized value for parameter '{PARAM_PREFIX}answered': {answered}",
                "unknown_answered",
            )

        limit = self._resolve_limit(raw_params.get(f"{PARAM_PREFIX}limit"), high_limits)
        return CategoriesOnAnswersParams(title=title, answered=answered, limit=limit)

    def _resolve_limit(self, raw: Optional[str], high_limits: bool) -> int:
        api = self.config.api
        maximum = api.max_limit_high if high_limits else api.max_limit

        if raw is None:
            return api.default_limit
        if raw.strip() == "max":
            return maximum

        try:
            limit = int(raw)
        except ValueError:
            raise ApiUsageError(
                f"Invalid value '{raw}' for integer parameter '{PARAM_PREFIX}limit'",
                "badinteger",
            ) from None

        if limit < 1:
            logger.warning(f"{PARAM_PREFIX}limit may not be less than 1 (set to {limit})")
            return 1
        if limit > maximum:
            logger.warning(
                f"{PARAM_PREFIX}limit may not be over {maximum} (set to {limit})"
            )
            return maximum
        return limit

    def describe(self) -> Dict[str, Any]:
        """Self-documentation of the module."""
        return {
            "name": MODULE_NAME,
            "prefix": PARAM_PREFIX,
            "description": "List all pages in a given category AND with given "
            "un/answered status",
            "params": {
                "title": {
                    "description": "Which category to enumerate (required).",
                    "required": True,
                },
                "answered": {
                    "description": "What questions are needed - answered or un-answered?",
                    "type": ["no", "yes"],
                    "default": "no",
                },
                "limit": {
                    "description": "The maximum number of pages to return.",
                    "type": "limit",
                    "default": self.config.api.default_limit,
                    "min": 1,
                    "max": self.config.api.max_limit,
                    "highmax": self.config.api.max_limit_high,
                },
            },
            "examples": [
                "Get most recent 10 unanswered questions in [[Category:Muppet Wiki]]:",
                f"  api.php?action=query&list={MODULE_NAME}&{PARAM_PREFIX}title=Muppet%20Wiki",
            ],
            "version": VERSION,
        }
