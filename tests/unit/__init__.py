"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested with the in-memory store or small stand-ins.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_hook_registry.py: Registration, ordering, freezing
    - test_dispatcher.py: CONTINUE/STOP dispatch semantics
    - test_category_viewer.py: Lazy query, paging, section points
    - test_category_page.py: View flow, diff-only view, page override
    - test_default_sections.py: Stock section markup
    - test_categories_on_answers.py: Status-filtered listing query
    - test_config_loader.py: Configuration loading/validation
"""
