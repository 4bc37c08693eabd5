"""
Integration Test: categoriesonanswers over the database store.

Tests:
    - Default limit of 10 on a larger wiki
    - Newest links first
    - Under-filled results when non-content pages match
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timedelta
from typing import Iterator

import pytest

from flexible_category import ApiUsageError, CategoriesOnAnswersQuery
from flexible_category.adapters.database_store import DatabaseCategoryStore, SingleConnectionPool
from flexible_category.domain.entities import Namespace
from tests.fixtures import title

START = datetime(2009, 11, 20)


@pytest.fixture
def wiki() -> Iterator[DatabaseCategoryStore]:
    """
    Muppet Wiki with 30 questions; every third one answered.
    Question 29 has a talk page that is also un-answered.
    """
    conn = sqlite3.connect(":memory:")
    store = DatabaseCategoryStore(SingleConnectionPool(conn))
    store.create_schema()

    wiki_category = title("Muppet Wiki", Namespace.CATEGORY)
    answered = title("Answered questions", Namespace.CATEGORY)
    unanswered = title("Un-answered questions", Namespace.CATEGORY)

    for i in range(30):
        question = title(f"Question {i:02d}")
        added = START + timedelta(hours=i)
        store.add_link(question, wiki_category, added)
        store.add_link(question, answered if i % 3 == 0 else unanswered, added)

    talk = title("Talk:Question 29")
    store.add_link(talk, wiki_category, START + timedelta(days=2))
    store.add_link(talk, unanswered, START + timedelta(days=2))
    yield store
    conn.close()


class TestCategoriesOnAnswersDatabase:
    def test_most_recent_ten_unanswered(self, wiki: DatabaseCategoryStore) -> None:
        """
        SCENARIO: coatitle=Muppet Wiki, defaults otherwise
        EXPECTED: At most 10 rows read; the talk page is dropped, leaving 9
        """
        result = CategoriesOnAnswersQuery(wiki).execute({"coatitle": "Muppet Wiki"})

        entries = result["query"]["categoriesonanswers"]
        assert len(entries) == 9
        assert entries[0] == {"ns": 0, "title": "Question 29"}
        assert all(entry["ns"] == 0 for entry in entries)
        assert [e["title"] for e in entries[:3]] == ["Question 29", "Question 28", "Question 26"]

    def test_answered_with_max_limit(self, wiki: DatabaseCategoryStore) -> None:
        result = CategoriesOnAnswersQuery(wiki).execute(
            {"coatitle": "Muppet Wiki", "coaanswered": "yes", "coalimit": "max"}
        )

        titles = [e["title"] for e in result["query"]["categoriesonanswers"]]
        assert len(titles) == 10
        assert titles[0] == "Question 27"
        assert titles[-1] == "Question 00"

    def test_bad_limit(self, wiki: DatabaseCategoryStore) -> None:
        with pytest.raises(ApiUsageError) as exc_info:
            CategoriesOnAnswersQuery(wiki).execute({"coatitle": "Muppet Wiki", "coalimit": "1.5"})

        assert exc_info.value.code == "badinteger"
