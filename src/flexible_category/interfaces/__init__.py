"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for
the external collaborators of the category page pipeline. High-level
modules depend on these abstractions, not on concrete implementations.

Protocols:
    - MembershipProviderProtocol: Category membership query
    - CategoryLinkStoreProtocol: Category intersection query
    - ArticleRendererProtocol: Plain page body rendering
    - OutputSinkProtocol: Page markup accumulation
    - RequestProtocol: Request parameter access
    - MessageSourceProtocol: Interface messages
    - SectionRendererProtocol: Default section rendering
"""

from flexible_category.interfaces.membership_provider import (
    CategoryLinkStoreProtocol,
    MembershipProviderProtocol,
)
from flexible_category.interfaces.page_io import (
    ArticleRendererProtocol,
    MessageSourceProtocol,
    OutputSinkProtocol,
    RequestProtocol,
)
from flexible_category.interfaces.section_renderer import (
    SectionRendererProtocol,
    ViewerStateProtocol,
)

__all__ = [
    "ArticleRendererProtocol",
    "CategoryLinkStoreProtocol",
    "MembershipProviderProtocol",
    "MessageSourceProtocol",
    "OutputSinkProtocol",
    "RequestProtocol",
    "SectionRendererProtocol",
    "ViewerStateProtocol",
]
