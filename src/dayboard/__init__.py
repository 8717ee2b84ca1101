"""
DayBoard - personal productivity tracker with end-of-day scoring.

Users plan dated tasks with a target item count, record progress, and end a
day to lock it and snapshot a productivity score. Ended days feed a monthly
calendar, which users may share publicly.

Architecture:
    REST API (FastAPI)
         │
         ▼
    DayBoardService (ownership, day lock, scoring)
         │
         ▼
    DayBoardStore (SQLAlchemy, async)
"""

__version__ = "0.1.0"
__author__ = "DayBoard Contributors"

from dayboard.exceptions import (
    DayBoardError,
    DayBoardValidationError,
    DayEndedError,
    DayAlreadyEndedError,
    DayBoardAuthenticationError,
    DayBoardNotFoundError,
    DayBoardConflictError,
    DayBoardConfigurationError,
)

__all__ = [
    "__version__",
    "DayBoardError",
    "DayBoardValidationError",
    "DayEndedError",
    "DayAlreadyEndedError",
    "DayBoardAuthenticationError",
    "DayBoardNotFoundError",
    "DayBoardConflictError",
    "DayBoardConfigurationError",
]
