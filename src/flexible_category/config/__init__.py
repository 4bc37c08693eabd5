"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of Flexible Category:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Profiles beside the config file, merged in order

Configuration Structure:
    - CategoryPageConfig: Root configuration object
    - PagingConfig: Listing page size
    - GalleryConfig: Media gallery switch
    - UserDefaultsConfig: Preference defaults (diffonly)
    - AnswersConfig: Answered / unanswered category names
    - ApiConfig: Query module limits
"""

from flexible_category.config.loader import ConfigLoader, load_config, merge_config
from flexible_category.config.models import (
    AnswersConfig,
    ApiConfig,
    CategoryPageConfig,
    GalleryConfig,
    NamespacesConfig,
    PagingConfig,
    PathsConfig,
    UserDefaultsConfig,
)

__all__ = [
    "AnswersConfig",
    "ApiConfig",
    "CategoryPageConfig",
    "ConfigLoader",
    "GalleryConfig",
    "NamespacesConfig",
    "PagingConfig",
    "PathsConfig",
    "UserDefaultsConfig",
    "load_config",
    "merge_config",
]
