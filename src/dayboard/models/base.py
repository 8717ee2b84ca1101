"""
Shared base for DayBoard models.
"""

from __future__ import annotations

import datetime as dt
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _as_utc(value: dt.datetime) -> dt.datetime:
    # SQLite hands timestamps back without tzinfo; they are always stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


UTCDateTime = Annotated[dt.datetime, AfterValidator(_as_utc)]


class DayBoardModel(BaseModel):
    """
    Base model for every DayBoard record.

    Fields are snake_case in Python and camelCase on the wire. Instances can
    be built straight from store rows (``from_attributes``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
