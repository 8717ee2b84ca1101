"""
Response envelopes of the REST API.
"""

from __future__ import annotations

from dayboard.models import DayBoardModel, DayRecord, PublicUser, User


class MessageResponse(DayBoardModel):
    message: str


class AuthResponse(DayBoardModel):
    token: str
    user: User


class EndDayResponse(DayBoardModel):
    message: str = "Day ended successfully"
    day_record: DayRecord


class PublicCalendarResponse(DayBoardModel):
    user: PublicUser
    day_records: list[DayRecord]
