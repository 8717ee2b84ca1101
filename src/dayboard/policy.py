"""
Day-lock policy.

Once a day record is ended, every task dated that day is frozen: nothing may
be added to, changed in, or removed from it.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING, Union

from dayboard.dates import to_day
from dayboard.exceptions import DayEndedError

if TYPE_CHECKING:
    from dayboard.store import DayBoardStore

logger = logging.getLogger(__name__)

LOCKED_MESSAGES = {
    "create": "Cannot add tasks to an ended day",
    "update": "Cannot update tasks for an ended day",
    "delete": "Cannot delete tasks from an ended day",
}


async def is_day_locked(store: DayBoardStore, user_id: str, day: Union[date, datetime, str]) -> bool:
    """True when the user's record for ``day`` exists and is ended."""
    record = await store.get_day_record(user_id, to_day(day))
    return bool(record and record.is_ended)


async def ensure_day_open(
    store: DayBoardStore,
    user_id: str,
    day: Union[date, datetime, str],
    action: str,
) -> None:
    """
    Reject a task write against an ended day.

    Args:
        store: Store to look the day record up in
        user_id: Owner of the day
        day: Day the task belongs to
        action: 'create', 'update' or 'delete'

    Raises:
        DayEndedError: The day has been ended
    """
    if await is_day_locked(store, user_id, day):
        logger.warning("Rejected task %s for user %s: %s is ended", action, user_id, day)
        raise DayEndedError(LOCKED_MESSAGES[action], user_id=user_id, day=day)
