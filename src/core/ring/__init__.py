"""
Ring — кольцевой двусвязный список цифр поверх арены слотов.
"""

from src.core.ring.arena import NodeArena
from src.core.ring.digit_ring import DigitRing

__all__ = [
    "DigitRing",
    "NodeArena",
]
