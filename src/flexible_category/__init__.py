"""
Flexible Category - Extensible Category Page Rendering.

Renders categorized listing pages out of independently replaceable
sections (top, subcategories, pages, media, other, bottom). Plugins
attach callbacks to named extension points to change what is rendered
around the page body and to replace or augment each section.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Extension-point registry built once at startup
    - Default section rendering by composition
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Core entities (Title, CategoryMember, CategoryMembership)
    - interfaces: Protocols for the external collaborators
    - registry: Extension-point registry and plugin loading
    - pipeline: Dispatcher, FlexibleCategoryViewer, FlexibleCategoryPage
    - rendering: Default section renderer
    - adapters: Stores, article renderer, output page, request, messages
    - api: Status-filtered listing query (categoriesonanswers)
    - config: Configuration models and loaders

Example:
    >>> config = load_config("config/default.yaml")
    >>> dispatcher = HookDispatcher(build_registry(config))
    >>> viewers = CategoryViewerFactory(dispatcher, store, config=config)
    >>> pages = CategoryPageFactory(dispatcher, articles, viewers, config)
    >>> page = pages.create(title, request, output)
    >>> page.view()

"""

import logging

from flexible_category.domain.entities import (
    CategoryMember,
    CategoryMembership,
    Namespace,
    PagingWindow,
    Title,
)
from flexible_category.domain.value_objects import HookContext, HookResult
from flexible_category.config.loader import load_config
from flexible_category.config.models import CategoryPageConfig
from flexible_category.registry.hook_registry import HookRegistry
from flexible_category.registry.plugins import build_registry, load_plugins
from flexible_category.pipeline.dispatcher import HookDispatcher
from flexible_category.pipeline.category_viewer import FlexibleCategoryViewer
from flexible_category.pipeline.category_page import (
    CategoryPageFactory,
    CategoryViewerFactory,
    FlexibleCategoryPage,
)
from flexible_category.rendering.default_sections import DefaultSectionRenderer
from flexible_category.api.categories_on_answers import CategoriesOnAnswersQuery
from flexible_category.api.errors import ApiUsageError

__version__ = "1.0.0"

__all__ = [
    "ApiUsageError",
    "CategoriesOnAnswersQuery",
    "CategoryMember",
    "CategoryMembership",
    "CategoryPageConfig",
    "CategoryPageFactory",
    "CategoryViewerFactory",
    "DefaultSectionRenderer",
    "FlexibleCategoryPage",
    "FlexibleCategoryViewer",
    "HookContext",
    "HookDispatcher",
    "HookRegistry",
    "HookResult",
    "Namespace",
    "PagingWindow",
    "Title",
    "build_registry",
    "configure_logging",
    "load_config",
    "load_plugins",
]


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Flexible Category.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import flexible_category
        >>> flexible_category.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("flexible_category").setLevel(level)
