"""
Day record models.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field

from dayboard.constants import ProductivityLabel
from dayboard.models.base import DayBoardModel, UTCDateTime


class DayRecord(DayBoardModel):
    """Per-user, per-date aggregate and end-of-day lock."""

    id: str
    user_id: str
    date: dt.date
    is_ended: bool = False
    ended_at: Optional[UTCDateTime] = None
    total_tasks: int = Field(default=0, ge=0)
    completed_tasks: int = Field(default=0, ge=0)
    overall_productivity: int = Field(default=0, ge=0, le=100)
    productivity_label: ProductivityLabel = ProductivityLabel.NOT_PRODUCTIVE
    summary: str = ""


class DaySummary(DayBoardModel):
    """Result of scoring one day's task snapshot."""

    total_tasks: int
    completed_tasks: int
    overall_productivity: int
    productivity_label: ProductivityLabel
