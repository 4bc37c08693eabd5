"""
Pipeline Package - Page Flow and Section Composition.

This package contains the orchestration logic of a category page view.

Components:
    - HookDispatcher: Runs extension point callbacks
    - FlexibleCategoryViewer: Lazy membership loading and the six sections
    - FlexibleCategoryPage: Top-level view flow with open/close points
    - CategoryViewerFactory: Builds viewers from shared collaborators
    - CategoryPageFactory: Builds pages with the configured user preferences

Design Principles:
    - All dependencies injected via constructor
    - One page and one viewer per request
    - Section content is extended at viewer level, order at page level
"""

from flexible_category.pipeline.dispatcher import HookDispatcher
from flexible_category.pipeline.category_viewer import FlexibleCategoryViewer
from flexible_category.pipeline.category_page import (
    CategoryPageFactory,
    CategoryPageOverride,
    CategoryViewerFactory,
    FlexibleCategoryPage,
    install_category_page_override,
)

__all__ = [
    "CategoryPageFactory",
    "CategoryPageOverride",
    "CategoryViewerFactory",
    "FlexibleCategoryPage",
    "FlexibleCategoryViewer",
    "HookDispatcher",
    "install_category_page_override",
]
