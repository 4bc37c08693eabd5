"""
API Package - Query Modules.

    - CategoriesOnAnswersQuery: Category members filtered by
      answered / un-answered status
    - ApiUsageError: Usage error with a machine-readable code
"""

from flexible_category.api.categories_on_answers import (
    CategoriesOnAnswersParams,
    CategoriesOnAnswersQuery,
)
from flexible_category.api.errors import ApiUsageError

__all__ = [
    "ApiUsageError",
    "CategoriesOnAnswersParams",
    "CategoriesOnAnswersQuery",
]
