"""
Contrib Package - Ready-made Plugins.

Each module defines ``register(registry)`` and can be listed under
``plugins`` in the configuration.

    - section_order: Reorder the listing sections at page level
"""
