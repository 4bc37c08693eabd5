"""
Performance Tests.

Benchmarks for category listing performance:
    - 5000-member category, one page view < 2 seconds
    - Walking every listing page < 10 seconds
"""
