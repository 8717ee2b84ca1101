"""
DayBoard persistence layer (SQLAlchemy, async).
"""

from dayboard.store.store import DayBoardStore, new_id

__all__ = [
    "DayBoardStore",
    "new_id",
]
