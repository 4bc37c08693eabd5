"""
Section Order Plugin.

Changes the order of the category listing sections. The plugin takes
over the close point, writes the viewer's sections in its own order
and stops the default composition.

Enable with the default order (pages before subcategories) by listing
``flexible_category.contrib.section_order`` under ``plugins`` in the
configuration, or register a SectionOrder with a custom order.
"""

from __future__ import annotations

import logging
from typing import Sequence

from flexible_category.domain.value_objects import HookContext, HookResult
from flexible_category.registry import hook_points
from flexible_category.registry.hook_registry import HookRegistry

logger = logging.getLogger(__name__)

SECTION_ACCESSORS = (
    "category_top",
    "subcategory_section",
    "pages_section",
    "image_section",
    "other_section",
    "category_bottom",
)

PAGES_FIRST = (
    "category_top",
    "pages_section",
    "subcategory_section",
    "image_section",
    "other_section",
    "category_bottom",
)


class SectionOrder:
    """Close-point callback rendering the sections in a given order."""

    def __init__(self, order: Sequence[str] = PAGES_FIRST) -> None:
        unknown = [name for name in order if name not in SECTION_ACCESSORS]
        if unknown:
            raise ValueError(f"Unknown sections: {unknown}")
        self.order = tuple(order)

    def __call__(self, context: HookContext) -> HookResult:
        page = context.subject
        viewer = page.viewer
        html = "".join(getattr(viewer, name)() for name in self.order)
        if html == "":
            html = viewer.renderer.empty_category(viewer)
        page.output.add_html(html)
        return HookResult.STOP

    def register(self, registry: HookRegistry) -> None:
        registry.register(
            hook_points.CLOSE_SHOW_CATEGORY,
            self,
            name="section_order",
            description=f"Render sections as {', '.join(self.order)}",
        )


def register(registry: HookRegistry) -> None:
    """Plugin entry point: pages before subcategories."""
    SectionOrder().register(registry)
