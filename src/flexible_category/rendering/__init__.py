"""
Rendering Package - Default Section Markup.

    - DefaultSectionRenderer: Stock markup of every category page section
"""

from flexible_category.rendering.default_sections import DefaultSectionRenderer

__all__ = ["DefaultSectionRenderer"]
