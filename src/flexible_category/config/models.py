"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator


class PagingConfig(BaseModel):
    """Category listing paging."""

    limit: int = Field(default=200, ge=1, le=5000)


class GalleryConfig(BaseModel):
    """Media section settings."""

    magic_gallery: bool = True


class UserDefaultsConfig(BaseModel):
    """User preference defaults used when the request does not say."""

    diffonly: bool = False


class AnswersConfig(BaseModel):
    """Auxiliary status categories of the categoriesonanswers query."""

    answered_category: str = Field(default="Answered questions")
    unanswered_category: str = Field(default="Un-answered questions")


class ApiConfig(BaseModel):
    """Limits of the query modules."""

    default_limit: int = Field(default=10, ge=1)
    max_limit: int = Field(default=500, ge=1)
    max_limit_high: int = Field(default=5000, ge=1)

    @model_validator(mode="after")
    def _check_limits(self) -> "ApiConfig":
        if self.default_limit > self.max_limit:
            raise ValueError("api.default_limit must not exceed api.max_limit")
        if self.max_limit > self.max_limit_high:
            raise ValueError("api.max_limit must not exceed api.max_limit_high")
        return self


class NamespacesConfig(BaseModel):
    """Namespace classification."""

    content: List[int] = Field(default_factory=lambda: [0])

    @field_validator("content")
    @classmethod
    def _not_empty(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("namespaces.content must list at least one namespace")
        return value


class PathsConfig(BaseModel):
    """URL layout."""

    article_path: str = Field(default="/wiki/{title}")

    @field_validator("article_path")
    @classmethod
    def _has_placeholder(cls, value: str) -> str:
        if "{title}" not in value:
            raise ValueError("paths.article_path must contain '{title}'")
        return value


class CategoryPageConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    paging: PagingConfig = Field(default_factory=PagingConfig)
    gallery: GalleryConfig = Field(default_factory=GalleryConfig)
    user: UserDefaultsConfig = Field(default_factory=UserDefaultsConfig)
    answers: AnswersConfig = Field(default_factory=AnswersConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    namespaces: NamespacesConfig = Field(default_factory=NamespacesConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    messages: Dict[str, str] = Field(
        default_factory=dict, description="Message key -> text overrides"
    )
    plugins: List[str] = Field(
        default_factory=list,
        description="Importable modules exposing register(registry)",
    )

    model_config = {"populate_by_name": True}
