"""
Integration Tests - End-to-End Page Views and Queries.

These tests wire the components the way a host does at startup and
run them against an in-memory sqlite3 database.

Test Files:
    - test_category_page_view.py: Config, plugins and paging end to end
    - test_answers_query_database.py: categoriesonanswers over SQL
"""
