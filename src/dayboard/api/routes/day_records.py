"""
Day record endpoints: /api/day-records
"""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Query

from dayboard.api.deps import CurrentUser, ServiceDep
from dayboard.api.inputs import EndDayInput
from dayboard.api.responses import EndDayResponse, PublicCalendarResponse
from dayboard.models import DayRecord, PublicUser

router = APIRouter(
    prefix="/api/day-records",
    tags=["day-records"],
)

MonthQuery = Annotated[Optional[int], Query(description="1-12, defaults to the current month")]
YearQuery = Annotated[Optional[int], Query(description="Defaults to the current year")]


@router.post("/end-day", response_model=EndDayResponse)
async def end_day(params: EndDayInput, user: CurrentUser, service: ServiceDep) -> EndDayResponse:
    """Score the day's tasks and lock the day."""
    record = await service.end_day(user.id, params.date, params.summary)
    return EndDayResponse(day_record=record)


@router.get("/day/{day}", response_model=DayRecord)
async def get_day_record(day: str, user: CurrentUser, service: ServiceDep) -> DayRecord:
    return await service.get_day_record(user.id, day)


@router.get("/calendar", response_model=list[DayRecord])
async def get_calendar(
    user: CurrentUser,
    service: ServiceDep,
    month: MonthQuery = None,
    year: YearQuery = None,
) -> list[DayRecord]:
    """The caller's ended days of one month."""
    return await service.get_calendar(user.id, month, year)


@router.get("/public/{user_id}/calendar", response_model=PublicCalendarResponse)
async def get_public_calendar(
    user_id: str,
    service: ServiceDep,
    month: MonthQuery = None,
    year: YearQuery = None,
) -> PublicCalendarResponse:
    """A visible user's ended days of one month."""
    calendar = await service.get_public_calendar(user_id, month, year)
    return PublicCalendarResponse(user=calendar.user, day_records=calendar.day_records)


@router.get("/users", response_model=list[PublicUser])
async def list_users(service: ServiceDep) -> list[PublicUser]:
    """Users whose schedules are public, sorted by username."""
    return await service.list_visible_users()
