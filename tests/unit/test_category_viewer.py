"""
Unit Tests for FlexibleCategoryViewer.

Test Aspects Covered:
    ✅ Business Logic: Lazy one-time query, partitioning, paging
    ✅ Extension Points: init, doCategoryQuery, per-section STOP/CONTINUE
    ✅ Edge Cases: Empty category, gallery disabled, init stopped
    ✅ Error Handling: Provider errors propagate
"""

from __future__ import annotations

from typing import Callable

import pytest

from flexible_category.adapters.memory_store import InMemoryCategoryStore
from flexible_category.adapters.messages import DEFAULT_MESSAGES
from flexible_category.domain.entities import (
    CategoryMember,
    MembershipFinalisedError,
    Namespace,
)
from flexible_category.domain.value_objects import HookResult
from flexible_category.pipeline.category_viewer import FlexibleCategoryViewer
from flexible_category.registry import hook_points
from flexible_category.registry.hook_registry import HookRegistry
from tests.fixtures import RecordingHook, title

ViewerFactory = Callable[..., FlexibleCategoryViewer]


def texts(members):
    return [m.title.prefixed_text for m in members]


class TestInitialization:
    """Lazy, one-time membership loading."""

    def test_constructor_does_not_query(
        self, make_viewer: ViewerFactory, store: InMemoryCategoryStore
    ) -> None:
        viewer = make_viewer()

        assert viewer.is_initialized is False
        assert store.query_count == 0

    def test_query_runs_once(
        self, make_viewer: ViewerFactory, store: InMemoryCategoryStore
    ) -> None:
        """
        SCENARIO: get_html() followed by every section accessor
        EXPECTED: Exactly one membership query
        """
        viewer = make_viewer()

        viewer.get_html()
        viewer.category_top()
        viewer.subcategory_section()
        viewer.pages_section()
        viewer.image_section()
        viewer.other_section()
        viewer.category_bottom()

        assert store.query_count == 1
        assert viewer.is_initialized is True

    def test_members_partitioned(self, make_viewer: ViewerFactory) -> None:
        viewer = make_viewer()

        membership = viewer.ensure_initialized()

        assert texts(membership.subcategories) == [
            "Category:Muppet Show characters",
            "Category:Sesame Street characters",
        ]
        assert texts(membership.pages) == ["Fozzie Bear", "Kermit the Frog", "Miss Piggy"]
        assert texts(membership.media) == ["File:Kermit.jpg"]
        assert membership.next_page is None
        assert viewer.show_gallery is True

    def test_membership_finalised(self, make_viewer: ViewerFactory) -> None:
        viewer = make_viewer()
        viewer.ensure_initialized()

        assert viewer.membership.finalised is True
        with pytest.raises(MembershipFinalisedError):
            viewer.add_page(CategoryMember.for_title(title("Late arrival")))

    @pytest.mark.parametrize(
        "kwargs",
        [{"no_gallery": True}, {"magic_gallery": False}],
    )
    def test_gallery_disabled_lists_files_as_pages(
        self, make_viewer: ViewerFactory, kwargs: dict
    ) -> None:
        viewer = make_viewer(**kwargs)

        membership = viewer.ensure_initialized()

        assert viewer.show_gallery is False
        assert membership.media == []
        assert "File:Kermit.jpg" in texts(membership.pages)
        assert viewer.image_section() == ""

    def test_init_stop_leaves_viewer_uninitialized(
        self,
        make_viewer: ViewerFactory,
        registry: HookRegistry,
        store: InMemoryCategoryStore,
    ) -> None:
        """
        SCENARIO: init callback returns STOP
        EXPECTED: No query, empty listing, and each accessor retries init
        """
        hook = RecordingHook(HookResult.STOP)
        registry.register(hook_points.VIEWER_INIT, hook)
        viewer = make_viewer()

        html = viewer.get_html()

        assert store.query_count == 0
        assert viewer.is_initialized is False
        assert html == DEFAULT_MESSAGES["category-empty"]
        # get_html() itself plus one per section
        assert hook.call_count == 7

    def test_init_receives_viewer(
        self, make_viewer: ViewerFactory, registry: HookRegistry
    ) -> None:
        hook = RecordingHook()
        registry.register(hook_points.VIEWER_INIT, hook)
        viewer = make_viewer()

        viewer.ensure_initialized()
        viewer.ensure_initialized()

        assert hook.call_count == 1
        assert hook.contexts[0].subject is viewer
        assert hook.contexts[0].output is None

    def test_do_category_query_stop_lets_plugin_supply_members(
        self,
        make_viewer: ViewerFactory,
        registry: HookRegistry,
        store: InMemoryCategoryStore,
    ) -> None:
        """
        SCENARIO: doCategoryQuery callback adds members and returns STOP
        EXPECTED: Default query skipped, injected members listed
        """

        def inject(context):
            context.subject.add_page(CategoryMember.for_title(title("Gonzo")))
            return HookResult.STOP

        registry.register(hook_points.DO_CATEGORY_QUERY, inject)
        viewer = make_viewer()

        membership = viewer.ensure_initialized()

        assert store.query_count == 0
        assert texts(membership.pages) == ["Gonzo"]
        assert membership.subcategories == []
        assert "Gonzo" in viewer.pages_section()

    def test_provider_error_propagates(self, make_viewer: ViewerFactory) -> None:
        class BrokenProvider:
            def fetch_members(self, category, window, limit):
                raise ConnectionError("database unavailable")

        viewer = make_viewer(provider=BrokenProvider())

        with pytest.raises(ConnectionError, match="database unavailable"):
            viewer.get_html()
        assert viewer.is_initialized is False


class TestPaging:
    """Listing windows and next-page cursors."""

    def test_limit_sets_next_page(self, make_viewer: ViewerFactory) -> None:
        """
        SCENARIO: More members than the limit
        EXPECTED: limit members kept, next_page is the sort key of the next one
        """
        viewer = make_viewer(limit=2)

        membership = viewer.ensure_initialized()

        assert membership.total == 2
        assert membership.next_page == "File:Kermit.jpg"

    def test_exact_limit_has_no_next_page(self, make_viewer: ViewerFactory) -> None:
        viewer = make_viewer(limit=6)

        membership = viewer.ensure_initialized()

        assert membership.total == 6
        assert membership.next_page is None

    def test_from_window(self, make_viewer: ViewerFactory) -> None:
        viewer = make_viewer(from_key="Fozzie Bear")

        membership = viewer.ensure_initialized()

        assert texts(membership.pages) == ["Fozzie Bear", "Kermit the Frog", "Miss Piggy"]
        assert membership.subcategories == []
        assert membership.media == []

    def test_until_window_is_flipped_to_ascending(self, make_viewer: ViewerFactory) -> None:
        """
        SCENARIO: until cursor (members fetched descending)
        EXPECTED: Partitions shown in ascending order
        """
        viewer = make_viewer(until_key="Miss Piggy")

        membership = viewer.ensure_initialized()

        assert texts(membership.pages) == ["Fozzie Bear", "Kermit the Frog"]
        assert texts(membership.subcategories) == [
            "Category:Muppet Show characters",
            "Category:Sesame Street characters",
        ]

    def test_until_window_with_limit(self, make_viewer: ViewerFactory) -> None:
        viewer = make_viewer(until_key="Kermit the Frog", limit=2)

        membership = viewer.ensure_initialized()

        assert texts(membership.pages) == ["Fozzie Bear"]
        assert texts(membership.media) == ["File:Kermit.jpg"]
        assert membership.next_page == "Category:Sesame Street characters"

    def test_from_wins_over_until(self, make_viewer: ViewerFactory) -> None:
        viewer = make_viewer(from_key="Kermit the Frog", until_key="B")

        membership = viewer.ensure_initialized()

        assert texts(membership.pages) == ["Kermit the Frog", "Miss Piggy"]

    def test_empty_cursors_are_unbounded(self, make_viewer: ViewerFactory) -> None:
        viewer = make_viewer(from_key="", until_key="")

        assert viewer.window.is_bounded is False
        assert viewer.ensure_initialized().total == 6


class TestSections:
    """Per-section extension points."""

    def test_continue_prepends_to_default(
        self, make_viewer: ViewerFactory, registry: HookRegistry
    ) -> None:
        registry.register(hook_points.PAGES_SECTION, RecordingHook(append="<p>intro</p>"))
        viewer = make_viewer()

        html = viewer.pages_section()

        assert html.startswith("<p>intro</p>")
        assert '<div id="mw-pages">' in html

    def test_stop_replaces_default(
        self, make_viewer: ViewerFactory, registry: HookRegistry
    ) -> None:
        """
        SCENARIO: Section callback appends markup and returns STOP
        EXPECTED: Section is exactly the callback's markup
        """
        registry.register(
            hook_points.SUBCATEGORY_SECTION,
            RecordingHook(HookResult.STOP, append="<p>custom</p>"),
        )
        viewer = make_viewer()

        assert viewer.subcategory_section() == "<p>custom</p>"

    def test_stop_without_output_hides_section(
        self, make_viewer: ViewerFactory, registry: HookRegistry
    ) -> None:
        registry.register(hook_points.IMAGE_SECTION, RecordingHook(HookResult.STOP))
        viewer = make_viewer()

        html = viewer.get_html()

        assert viewer.image_section() == ""
        assert "mw-category-media" not in html
        assert '<div id="mw-pages">' in html

    def test_section_callback_sees_viewer_and_output(
        self, make_viewer: ViewerFactory, registry: HookRegistry
    ) -> None:
        hook = RecordingHook()
        registry.register(hook_points.OTHER_SECTION, hook)
        viewer = make_viewer()

        viewer.other_section()

        context = hook.contexts[0]
        assert context.subject is viewer
        assert context.output is not None
        assert context.point == hook_points.OTHER_SECTION

    def test_other_section_can_be_filled(
        self, make_viewer: ViewerFactory, registry: HookRegistry
    ) -> None:
        registry.register(hook_points.OTHER_SECTION, RecordingHook(append="<div>extra</div>"))
        viewer = make_viewer()

        assert viewer.other_section() == "<div>extra</div>"


class TestComposition:
    """get_html() section order and the empty message."""

    def test_sections_composed_in_fixed_order(
        self, make_viewer: ViewerFactory, registry: HookRegistry
    ) -> None:
        calls = []
        for point in hook_points.SECTION_POINTS:
            registry.register(point, RecordingHook(calls=calls))
        viewer = make_viewer()

        viewer.get_html()

        assert calls == [
            hook_points.CATEGORY_TOP,
            hook_points.SUBCATEGORY_SECTION,
            hook_points.PAGES_SECTION,
            hook_points.IMAGE_SECTION,
            hook_points.OTHER_SECTION,
            hook_points.CATEGORY_BOTTOM,
        ]

    def test_get_html_is_concatenation_of_sections(self, make_viewer: ViewerFactory) -> None:
        viewer = make_viewer(limit=2)

        expected = "".join(
            [
                viewer.category_top(),
                viewer.subcategory_section(),
                viewer.pages_section(),
                viewer.image_section(),
                viewer.other_section(),
                viewer.category_bottom(),
            ]
        )

        assert viewer.get_html() == expected
        assert expected.startswith('<br style="clear:both;"/>\n(previous 2 | ')
        assert expected.index("mw-subcategories") < expected.rindex("(previous 2 | ")

    @pytest.mark.parametrize(
        "stopped",
        [
            (),
            (hook_points.PAGES_SECTION, hook_points.OTHER_SECTION),
            hook_points.SECTION_POINTS,
        ],
    )
    def test_get_html_concatenates_sections_with_callbacks(
        self, make_viewer: ViewerFactory, registry: HookRegistry, stopped: tuple
    ) -> None:
        """
        SCENARIO: Appending callback on every section, some of them stopping
        EXPECTED: get_html() equals the six sections joined, markers in order
        """
        for point in hook_points.SECTION_POINTS:
            result = HookResult.STOP if point in stopped else HookResult.CONTINUE
            registry.register(point, RecordingHook(result=result, append=f"[{point}]"))
        viewer = make_viewer(limit=2)

        html = viewer.get_html()

        sections = [
            viewer.category_top(),
            viewer.subcategory_section(),
            viewer.pages_section(),
            viewer.image_section(),
            viewer.other_section(),
            viewer.category_bottom(),
        ]
        assert html == "".join(sections)
        positions = [html.index(f"[{point}]") for point in hook_points.SECTION_POINTS]
        assert positions == sorted(positions)
        assert ('<div id="mw-pages">' in html) is (hook_points.PAGES_SECTION not in stopped)

    def test_empty_category_message_once(self, make_viewer: ViewerFactory) -> None:
        """
        SCENARIO: Category without members
        EXPECTED: Exactly the empty-category message
        """
        viewer = make_viewer(title=title("Empty", Namespace.CATEGORY))

        html = viewer.get_html()

        assert html == DEFAULT_MESSAGES["category-empty"]

    def test_empty_message_not_shown_when_plugin_adds_markup(
        self, make_viewer: ViewerFactory, registry: HookRegistry
    ) -> None:
        registry.register(hook_points.CATEGORY_TOP, RecordingHook(append="<p>banner</p>"))
        viewer = make_viewer(title=title("Empty", Namespace.CATEGORY))

        assert viewer.get_html() == "<p>banner</p>"

    def test_repr(self, make_viewer: ViewerFactory) -> None:
        viewer = make_viewer()

        assert "Category:Muppets" in repr(viewer)
        assert "initialized=False" in repr(viewer)
