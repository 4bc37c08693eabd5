"""
Domain Layer - Core Entities and Value Objects.

This package contains the core domain model for category pages.

Entities:
    - Title: Namespace-qualified page title
    - CategoryMember: One entry of a category listing
    - CategoryMembership: Partitioned membership state of a category
    - PagingWindow: from/until cursors of a listing slice

Value Objects:
    - HookResult: CONTINUE / STOP outcome of a callback
    - HookContext: What a callback receives

Design Principles:
    - Immutable where possible (frozen models)
    - No infrastructure dependencies
"""

from flexible_category.domain.entities import (
    CategoryLinkRow,
    CategoryMember,
    CategoryMembership,
    MembershipFinalisedError,
    Namespace,
    PagingWindow,
    Title,
)
from flexible_category.domain.value_objects import (
    HookCallback,
    HookContext,
    HookResult,
    OutputBuffer,
)

__all__ = [
    "CategoryLinkRow",
    "CategoryMember",
    "CategoryMembership",
    "HookCallback",
    "HookContext",
    "HookResult",
    "MembershipFinalisedError",
    "Namespace",
    "OutputBuffer",
    "PagingWindow",
    "Title",
]
