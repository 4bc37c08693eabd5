"""
Flexible Category Page - Top-Level View Flow.

Takes the place of the stock category page. The page body is rendered
by the article renderer; before and after it the page fires the open
and close extension points, so plugins can put any viewer section in
any order around the body. Without plugins the close point appends the
viewer's composed listing, which reproduces the stock layout.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from flexible_category.config.models import CategoryPageConfig
from flexible_category.domain.entities import Title
from flexible_category.domain.value_objects import HookContext, HookResult
from flexible_category.interfaces.membership_provider import MembershipProviderProtocol
from flexible_category.interfaces.page_io import (
    ArticleRendererProtocol,
    OutputSinkProtocol,
    RequestProtocol,
)
from flexible_category.interfaces.section_renderer import SectionRendererProtocol
from flexible_category.pipeline.category_viewer import FlexibleCategoryViewer
from flexible_category.pipeline.dispatcher import HookDispatcher
from flexible_category.registry import hook_points
from flexible_category.registry.hook_registry import HookRegistry
from flexible_category.rendering.default_sections import DefaultSectionRenderer

logger = logging.getLogger(__name__)


class CategoryViewerFactory:
    """Builds viewers that share the process-wide collaborators."""

    def __init__(
        self,
        dispatcher: HookDispatcher,
        provider: MembershipProviderProtocol,
        renderer: Optional[SectionRendererProtocol] = None,
        config: Optional[CategoryPageConfig] = None,
    ) -> None:
        """
        Initialize factory.

        Args:
            dispatcher: Extension point dispatcher
            provider: Membership data source
            renderer: Section renderer; built from the config if omitted
            config: Site configuration
        """
        self.dispatcher = dispatcher
        self.provider = provider
        self.config = config or CategoryPageConfig()
        self.renderer = renderer or DefaultSectionRenderer.from_config(self.config)

    def create(
        self,
        title: Title,
        from_key: Optional[str] = None,
        until_key: Optional[str] = None,
        no_gallery: bool = False,
    ) -> FlexibleCategoryViewer:
        return FlexibleCategoryViewer(
            title,
            dispatcher=self.dispatcher,
            provider=self.provider,
            renderer=self.renderer,
            from_key=from_key,
            until_key=until_key,
            limit=self.config.paging.limit,
            magic_gallery=self.config.gallery.magic_gallery,
            no_gallery=no_gallery,
        )


class FlexibleCategoryPage:
    """
    One page view of a category.

    Extension points (subject is the page):
        - FlexibleCategoryPageView: STOP ends the view
        - FlexibleCategoryPage::openShowCategory: CONTINUE appends the
          default pre-body markup
        - FlexibleCategoryPage::closeShowCategory: CONTINUE appends the
          viewer's composed listing

    Callbacks that replace the defaults write to ``page.output`` and
    may use ``page.viewer`` to render individual sections.
    """

    def __init__(
        self,
        title: Title,
        request: RequestProtocol,
        output: OutputSinkProtocol,
        dispatcher: HookDispatcher,
        article_renderer: ArticleRendererProtocol,
        viewer_factory: CategoryViewerFactory,
        user_diffonly: bool = False,
    ) -> None:
        """
        Initialize page.

        Args:
            title: Title of the viewed page
            request: Incoming request parameters
            output: Sink the page markup is written to
            dispatcher: Extension point dispatcher
            article_renderer: Renders the plain page body
            viewer_factory: Builds the category viewer
            user_diffonly: The user's "diff only" preference
        """
        self.title = title
        self.request = request
        self.output = output
        self.dispatcher = dispatcher
        self.article_renderer = article_renderer
        self.viewer_factory = viewer_factory
        self.user_diffonly = user_diffonly
        self.viewer: Optional[FlexibleCategoryViewer] = None

    def view(self) -> None:
        """Render the page into the output sink."""
        diff = self.request.get_val("diff")
        diff_only = self.request.get_bool("diffonly", self.user_diffonly)

        if diff is not None and diff_only:
            logger.debug(f"Diff-only view of {self.title}")
            self.article_view()
            return

        if not self.dispatcher.run(hook_points.PAGE_VIEW, self).should_continue:
            logger.debug(f"View of {self.title} taken over by hook")
            return

        self.viewer = self.viewer_factory.create(
            self.title,
            from_key=self.request.get_val("from"),
            until_key=self.request.get_val("until"),
            no_gallery=bool(getattr(self.output, "no_gallery", False)),
        )

        is_category = self.title.is_category
        if is_category:
            self.open_show_category()

        self.article_view()

        if is_category:
            self.close_show_category()

    def article_view(self) -> None:
        """Default rendering of the page body."""
        self.output.add_html(self.article_renderer.render(self.title))

    def open_show_category(self) -> None:
        """Fire the open point; append the default pre-body markup unless stopped."""
        if self.dispatcher.run(hook_points.OPEN_SHOW_CATEGORY, self).should_continue:
            self.output.add_html(self.article_renderer.open_show_category(self.title))

    def close_show_category(self) -> None:
        """Fire the close point; append the composed listing unless stopped."""
        if self.dispatcher.run(hook_points.CLOSE_SHOW_CATEGORY, self).should_continue:
            self.output.add_html(self._require_viewer().get_html())

    def _require_viewer(self) -> FlexibleCategoryViewer:
        if self.viewer is None:
            raise RuntimeError("Category viewer is created by view()")
        return self.viewer


class CategoryPageFactory:
    """Builds page views that follow the site's user preferences."""

    def __init__(
        self,
        dispatcher: HookDispatcher,
        article_renderer: ArticleRendererProtocol,
        viewer_factory: CategoryViewerFactory,
        config: Optional[CategoryPageConfig] = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.article_renderer = article_renderer
        self.viewer_factory = viewer_factory
        self.config = config or viewer_factory.config

    def create(
        self,
        title: Title,
        request: RequestProtocol,
        output: OutputSinkProtocol,
    ) -> FlexibleCategoryPage:
        return FlexibleCategoryPage(
            title,
            request=request,
            output=output,
            dispatcher=self.dispatcher,
            article_renderer=self.article_renderer,
            viewer_factory=self.viewer_factory,
            user_diffonly=self.config.user.diffonly,
        )


PageFactory = Callable[[Any], FlexibleCategoryPage]


class CategoryPageOverride:
    """
    Callback for the host's CategoryPageView point.

    Replaces the stock category page: builds a FlexibleCategoryPage for
    the host article, views it, and stops the host's default view.
    """

    def __init__(self, page_factory: PageFactory) -> None:
        self.page_factory = page_factory

    def __call__(self, context: HookContext) -> HookResult:
        page = self.page_factory(context.subject)
        page.view()
        return HookResult.STOP


def install_category_page_override(
    registry: HookRegistry,
    page_factory: PageFactory,
) -> None:
    """Register the override on the host's CategoryPageView point."""
    registry.register(
        hook_points.CATEGORY_PAGE_VIEW,
        CategoryPageOverride(page_factory),
        name="flexible_category_page",
        description="Replace the stock category page with FlexibleCategoryPage",
    )
