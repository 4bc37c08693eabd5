"""
Flexible Category Viewer - Lazy Membership Loading and Sections.

The viewer fetches the category membership at most once per instance
and renders the listing as six sections. Every section runs its own
extension point before the default rendering, so plugins can prepend
to a section or replace it outright. get_html() composes the sections
in a fixed order; reordering is done at page level.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from flexible_category.domain.entities import (
    CategoryMember,
    CategoryMembership,
    Namespace,
    PagingWindow,
    Title,
)
from flexible_category.domain.value_objects import OutputBuffer
from flexible_category.interfaces.membership_provider import MembershipProviderProtocol
from flexible_category.interfaces.section_renderer import (
    SectionRendererProtocol,
    ViewerStateProtocol,
)
from flexible_category.pipeline.dispatcher import HookDispatcher
from flexible_category.registry import hook_points

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 200


class FlexibleCategoryViewer:
    """
    Sectioned renderer of one category listing.

    One instance serves one request. The membership query runs on the
    first call to ensure_initialized(), which every section accessor
    makes; later calls reuse the result.

    Extension points (subject is the viewer):
        - FlexibleCategoryViewer::init: STOP skips initialization
        - FlexibleCategoryViewer::doCategoryQuery: STOP skips the default
          query; callbacks may add members themselves
        - One point per section with an output accumulator: STOP keeps
          only what callbacks appended
    """

    def __init__(
        self,
        title: Title,
        dispatcher: HookDispatcher,
        provider: MembershipProviderProtocol,
        renderer: SectionRendererProtocol,
        from_key: Optional[str] = None,
        until_key: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        magic_gallery: bool = True,
        no_gallery: bool = False,
    ) -> None:
        """
        Initialize viewer. No query is made here.

        Args:
            title: The category being listed
            dispatcher: Extension point dispatcher
            provider: Membership query collaborator
            renderer: Default section renderer
            from_key: Show members with sort key >= from_key
            until_key: Show members with sort key < until_key
            limit: Members per listing page
            magic_gallery: Show file members as a gallery
            no_gallery: Gallery suppressed for this page
        """
        self._title = title
        self._window = PagingWindow(from_key=from_key or None, until_key=until_key or None)
        self._limit = limit
        self.dispatcher = dispatcher
        self.provider = provider
        self.renderer = renderer

        self._magic_gallery = magic_gallery
        self._no_gallery = no_gallery
        self.show_gallery = False

        # From wins over until; until pages are fetched descending
        self._flip = not self._window.from_key and bool(self._window.until_key)
        self._membership = CategoryMembership()
        self._initialized = False

    @property
    def title(self) -> Title:
        return self._title

    @property
    def window(self) -> PagingWindow:
        return self._window

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def membership(self) -> CategoryMembership:
        return self._membership

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def ensure_initialized(self) -> CategoryMembership:
        """
        Load the membership once.

        If the init extension point stops, the viewer stays
        uninitialized and the next call tries again.

        Returns:
            The membership state (empty while uninitialized)

        Raises:
            Any error of the membership provider, unchanged
        """
        if self._initialized:
            return self._membership

        if not self.dispatcher.run(hook_points.VIEWER_INIT, self).should_continue:
            logger.debug(f"Initialization of {self._title} skipped by hook")
            return self._membership

        self.show_gallery = self._magic_gallery and not self._no_gallery
        self.clear_category_state()
        self.do_category_query()
        self.finalise_category_state()
        self._initialized = True
        return self._membership

    def clear_category_state(self) -> None:
        self._membership = CategoryMembership()

    def do_category_query(self) -> None:
        """Run the default membership query unless a hook suppresses it."""
        if not self.dispatcher.run(hook_points.DO_CATEGORY_QUERY, self).should_continue:
            logger.debug(f"Default query for {self._title} suppressed by hook")
            return

        start = time.perf_counter()
        members = self.provider.fetch_members(self._title, self._window, self._limit)

        for count, member in enumerate(members, start=1):
            if count > self._limit:
                self._membership.set_next_page(member.sort_key)
                break
            self._add_member(member)

        logger.debug(
            f"Queried {self._title}: {self._membership.total} members "
            f"({time.perf_counter() - start:.3f}s)"
        )

    def finalise_category_state(self) -> None:
        self._membership.finalise(flip=self._flip)

    def add_subcategory(self, member: CategoryMember) -> None:
        self._membership.add_subcategory(member)

    def add_page(self, member: CategoryMember) -> None:
        self._membership.add_page(member)

    def add_image(self, member: CategoryMember) -> None:
        self._membership.add_media(member)

    def _add_member(self, member: CategoryMember) -> None:
        namespace = member.title.namespace
        if namespace == Namespace.CATEGORY:
            self.add_subcategory(member)
        elif self.show_gallery and namespace == Namespace.FILE:
            self.add_image(member)
        else:
            self.add_page(member)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def get_html(self) -> str:
        """
        Compose all sections in their fixed order.

        Returns:
            Section markup, or the empty-category message when every
            section came out empty
        """
        self.ensure_initialized()

        html = "".join(section() for section in self._sections())
        if html == "":
            html = self.renderer.empty_category(self)
        return html

    def _sections(self) -> List[Callable[[], str]]:
        return [
            self.category_top,
            self.subcategory_section,
            self.pages_section,
            self.image_section,
            self.other_section,
            self.category_bottom,
        ]

    def category_top(self) -> str:
        return self._render_section(hook_points.CATEGORY_TOP, self.renderer.category_top)

    def subcategory_section(self) -> str:
        return self._render_section(
            hook_points.SUBCATEGORY_SECTION, self.renderer.subcategory_section
        )

    def pages_section(self) -> str:
        return self._render_section(hook_points.PAGES_SECTION, self.renderer.pages_section)

    def image_section(self) -> str:
        return self._render_section(hook_points.IMAGE_SECTION, self.renderer.image_section)

    def other_section(self) -> str:
        return self._render_section(hook_points.OTHER_SECTION, self.renderer.other_section)

    def category_bottom(self) -> str:
        return self._render_section(
            hook_points.CATEGORY_BOTTOM, self.renderer.category_bottom
        )

    def _render_section(
        self,
        point: str,
        default: Callable[[ViewerStateProtocol], str],
    ) -> str:
        self.ensure_initialized()
        output = OutputBuffer()
        if self.dispatcher.run(point, self, output).should_continue:
            output.add_html(default(self))
        return output.getvalue()

    def __repr__(self) -> str:
        return (
            f"FlexibleCategoryViewer(title={self._title.prefixed_text!r}, "
            f"initialized={self._initialized}, members={self._membership.total})"
        )
