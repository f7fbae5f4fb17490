"""
Core primitives: positional radix helpers, the digit ring container,
error taxonomy, snapshot models and contracts.

This module contains the foundational building blocks that are independent
of external systems (files, serialization targets, etc.).
"""
