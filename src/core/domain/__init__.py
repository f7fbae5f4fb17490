"""
Domain models and value objects.

Contains serializable snapshots of numbers.
"""

from src.core.domain.number_snapshot import NumberSnapshot

__all__ = [
    "NumberSnapshot",
]
