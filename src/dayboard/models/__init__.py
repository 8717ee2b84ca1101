"""
DayBoard Data Models.

Pydantic models shared by the store, the service and the REST layer.

Models:
    - Task: Dated work item with a progress counter
    - TaskChanges: Partial task update
    - DayRecord: Per-user, per-date aggregate and lock
    - DaySummary: Scored task snapshot of a day
    - User: Registered user
    - PublicUser: Publicly visible part of a user
"""

from dayboard.models.base import DayBoardModel
from dayboard.models.task import Task, TaskChanges
from dayboard.models.day_record import DayRecord, DaySummary
from dayboard.models.user import User, PublicUser

__all__ = [
    "DayBoardModel",
    "Task",
    "TaskChanges",
    "DayRecord",
    "DaySummary",
    "User",
    "PublicUser",
]
