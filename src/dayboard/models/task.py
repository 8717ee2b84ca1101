"""
Task models.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from dayboard.models.base import DayBoardModel, UTCDateTime


class Task(DayBoardModel):
    """
    A dated work item with a progress counter.

    ``completion_percentage`` and ``is_completed`` are derived by the store on
    every write and are never set by callers.
    """

    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    total_items: int = Field(ge=1)
    completed_items: int = Field(default=0, ge=0)
    completion_percentage: int = Field(default=0, ge=0, le=100)
    is_completed: bool = False
    note: Optional[str] = None
    date: dt.date
    created_at: UTCDateTime


class TaskChanges(BaseModel):
    """
    Partial update for a task.

    Each field left as None keeps the stored value.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    total_items: Optional[int] = None
    completed_items: Optional[int] = None
    note: Optional[str] = None
