"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import pytest

from flexible_category.adapters.memory_store import InMemoryCategoryStore
from flexible_category.adapters.messages import MessageCatalog
from flexible_category.adapters.web import MappingRequest, OutputPage, StaticArticleRenderer
from flexible_category.config.models import CategoryPageConfig
from flexible_category.domain.entities import Namespace, Title
from flexible_category.pipeline.category_page import CategoryViewerFactory, FlexibleCategoryPage
from flexible_category.pipeline.category_viewer import FlexibleCategoryViewer
from flexible_category.pipeline.dispatcher import HookDispatcher
from flexible_category.registry.hook_registry import HookRegistry
from flexible_category.rendering.default_sections import DefaultSectionRenderer
from tests.fixtures import title


@pytest.fixture
def sample_config_path() -> Path:
    """Path to the shipped default configuration."""
    return Path(__file__).parent.parent / "config" / "default.yaml"


@pytest.fixture
def default_config() -> CategoryPageConfig:
    return CategoryPageConfig()


@pytest.fixture
def store() -> InMemoryCategoryStore:
    """Store with a small Muppets category."""
    store = InMemoryCategoryStore(base_time=datetime(2009, 11, 20, 12, 0, 0))
    for name in ["Sesame Street characters", "Muppet Show characters"]:
        store.add_link(title(name, Namespace.CATEGORY), "Muppets")
    for name in ["Kermit the Frog", "Miss Piggy", "Fozzie Bear"]:
        store.add_link(title(name), "Muppets")
    store.add_link(title("File:Kermit.jpg"), "Muppets")
    return store


@pytest.fixture
def registry() -> HookRegistry:
    """Empty, unfrozen registry."""
    return HookRegistry()


@pytest.fixture
def dispatcher(registry: HookRegistry) -> HookDispatcher:
    return HookDispatcher(registry)


@pytest.fixture
def messages() -> MessageCatalog:
    return MessageCatalog()


@pytest.fixture
def renderer(messages: MessageCatalog) -> DefaultSectionRenderer:
    return DefaultSectionRenderer(messages)


@pytest.fixture
def category() -> Title:
    return title("Muppets", Namespace.CATEGORY)


@pytest.fixture
def make_viewer(
    dispatcher: HookDispatcher,
    store: InMemoryCategoryStore,
    renderer: DefaultSectionRenderer,
    category: Title,
) -> Callable[..., FlexibleCategoryViewer]:
    """Factory for viewers over the sample store."""

    def _make(**kwargs: object) -> FlexibleCategoryViewer:
        kwargs.setdefault("provider", store)
        return FlexibleCategoryViewer(
            kwargs.pop("title", category),
            dispatcher=dispatcher,
            renderer=renderer,
            **kwargs,
        )

    return _make


@pytest.fixture
def viewer_factory(
    dispatcher: HookDispatcher,
    store: InMemoryCategoryStore,
    renderer: DefaultSectionRenderer,
    default_config: CategoryPageConfig,
) -> CategoryViewerFactory:
    return CategoryViewerFactory(dispatcher, store, renderer, default_config)


@pytest.fixture
def articles(category: Title) -> StaticArticleRenderer:
    renderer = StaticArticleRenderer(category_preamble="<!-- category -->")
    renderer.set_page(category, "<p>All about Muppets.</p>")
    return renderer


@pytest.fixture
def make_page(
    dispatcher: HookDispatcher,
    articles: StaticArticleRenderer,
    viewer_factory: CategoryViewerFactory,
    category: Title,
) -> Callable[..., FlexibleCategoryPage]:
    """Factory for pages; pass query= for request parameters."""

    def _make(
        query: str = "",
        page_title: Optional[Title] = None,
        user_diffonly: bool = False,
    ) -> FlexibleCategoryPage:
        return FlexibleCategoryPage(
            page_title or category,
            request=MappingRequest.from_query_string(query),
            output=OutputPage(),
            dispatcher=dispatcher,
            article_renderer=articles,
            viewer_factory=viewer_factory,
            user_diffonly=user_diffonly,
        )

    return _make
