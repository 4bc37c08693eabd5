"""
Test Suite for Flexible Category.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Full page views and API queries over real stores
    - performance/: Benchmarks with large categories
    - fixtures/: Shared test helpers

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest -m "not slow"                    # Skip long benchmarks
"""
