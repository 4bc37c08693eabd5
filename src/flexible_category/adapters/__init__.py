"""
Adapters Package - Infrastructure Implementations.

This package contains concrete implementations of the protocols
defined in the interfaces package. Following the Hexagonal
Architecture (Ports & Adapters) pattern.

Stores:
    - InMemoryCategoryStore: Link table in memory for development/testing
    - DatabaseCategoryStore: page / categorylinks tables over DB-API

Web:
    - MappingRequest: Request parameters from a mapping or query string
    - OutputPage: Output sink of a page view
    - StaticArticleRenderer: Page bodies from a mapping

Messages:
    - MessageCatalog: English defaults with overrides

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from flexible_category.adapters.database_store import (
    DatabaseCategoryStore,
    SingleConnectionPool,
)
from flexible_category.adapters.memory_store import InMemoryCategoryStore
from flexible_category.adapters.messages import MessageCatalog
from flexible_category.adapters.web import (
    MappingRequest,
    OutputPage,
    StaticArticleRenderer,
)

__all__ = [
    "DatabaseCategoryStore",
    "InMemoryCategoryStore",
    "MappingRequest",
    "MessageCatalog",
    "OutputPage",
    "SingleConnectionPool",
    "StaticArticleRenderer",
]
