"""
Storage — хранение чисел во внешних файлах (decimal и JSON snapshot).
"""

from src.storage.number_files import (
    load_number,
    load_snapshot,
    save_number,
    save_snapshot,
)

__all__ = [
    "load_number",
    "load_snapshot",
    "save_number",
    "save_snapshot",
]
