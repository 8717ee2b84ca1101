"""
Pydantic Input Models for the DayBoard REST API.

This module defines the request bodies accepted by the API. Each model
includes field constraints and descriptions; keys are camelCase on the wire.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from dayboard.constants import (
    PASSWORD_MIN_LENGTH,
    SUMMARY_MAX_LENGTH,
    TASK_TEXT_MAX_LENGTH,
    TASK_TITLE_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
)
from dayboard.dates import to_day
from dayboard.exceptions import DayBoardValidationError
from dayboard.models import TaskChanges


class BaseAPIInput(BaseModel):
    """Base input model with common configuration."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _parse_day(value: Any) -> Any:
    if value is None or isinstance(value, dt.date):
        return value
    try:
        return to_day(value)
    except DayBoardValidationError as e:
        raise ValueError(str(e)) from e


# =============================================================================
# Auth Input Models
# =============================================================================


class RegisterInput(BaseAPIInput):
    """Input for creating an account."""

    username: str = Field(
        ...,
        description="Public display name",
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
    )
    email: str = Field(
        ...,
        description="Login email (e.g., 'ada@example.com')",
        max_length=255,
    )
    password: str = Field(
        ...,
        description="Plain-text password, hashed before storage",
        min_length=PASSWORD_MIN_LENGTH,
    )


class LoginInput(BaseAPIInput):
    """Input for signing in."""

    email: str = Field(..., description="Login email", min_length=1)
    password: str = Field(..., description="Password", min_length=1)


class ProfileUpdateInput(BaseAPIInput):
    """Input for changing profile visibility."""

    profile_visible: bool = Field(
        ...,
        description="Whether other users may see this calendar and these tasks",
    )


# =============================================================================
# Task Input Models
# =============================================================================


class TaskCreateInput(BaseAPIInput):
    """Input for creating a new task."""

    title: str = Field(
        ...,
        description="Task title (e.g., 'Solve exercises', 'Read chapters')",
        min_length=1,
        max_length=TASK_TITLE_MAX_LENGTH,
    )
    description: Optional[str] = Field(
        default=None,
        description="Task description",
        max_length=TASK_TEXT_MAX_LENGTH,
    )
    total_items: int = Field(
        ...,
        description="Number of items that make the task complete",
        ge=1,
    )
    date: dt.date = Field(
        ...,
        description="Day the task belongs to, 'YYYY-MM-DD' or an ISO datetime",
    )

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return _parse_day(v)


class TaskUpdateInput(BaseAPIInput):
    """Input for updating a task. Omitted fields keep their value."""

    title: Optional[str] = Field(
        default=None,
        description="New task title",
        min_length=1,
        max_length=TASK_TITLE_MAX_LENGTH,
    )
    description: Optional[str] = Field(
        default=None,
        description="New description",
        max_length=TASK_TEXT_MAX_LENGTH,
    )
    total_items: Optional[int] = Field(
        default=None,
        description="New target item count; completed items are clamped to it",
        ge=1,
    )
    completed_items: Optional[int] = Field(
        default=None,
        description="New completed item count (0..totalItems)",
        ge=0,
    )
    note: Optional[str] = Field(
        default=None,
        description="Progress note",
        max_length=TASK_TEXT_MAX_LENGTH,
    )

    def to_changes(self) -> TaskChanges:
        return TaskChanges(
            title=self.title,
            description=self.description,
            total_items=self.total_items,
            completed_items=self.completed_items,
            note=self.note,
        )


class TaskProgressInput(BaseAPIInput):
    """Input for recording progress on a task."""

    completed_items: int = Field(
        ...,
        description="Completed item count (0..totalItems)",
        ge=0,
    )
    note: Optional[str] = Field(
        default=None,
        description="Progress note",
        max_length=TASK_TEXT_MAX_LENGTH,
    )


# =============================================================================
# Day Record Input Models
# =============================================================================


class EndDayInput(BaseAPIInput):
    """Input for ending a day."""

    date: dt.date = Field(
        ...,
        description="Day to end, 'YYYY-MM-DD' or an ISO datetime",
    )
    summary: Optional[str] = Field(
        default=None,
        description="Free-text reflection on the day",
        max_length=SUMMARY_MAX_LENGTH,
    )

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return _parse_day(v)
