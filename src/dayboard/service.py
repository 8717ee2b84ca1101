"""
DayBoard Service.

DayBoardService implements every tracker operation on top of a
DayBoardStore: ownership checks, the day-lock policy, progress validation,
end-of-day scoring and calendar aggregation. It knows nothing about HTTP.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

from dayboard.auth import generate_token, hash_password, validate_email, verify_password
from dayboard.constants import (
    PASSWORD_MIN_LENGTH,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
)
from dayboard.dates import month_bounds, to_day, utc_now
from dayboard.exceptions import (
    DayAlreadyEndedError,
    DayBoardAuthenticationError,
    DayBoardNotFoundError,
    DayBoardValidationError,
)
from dayboard.models import DayRecord, PublicUser, Task, TaskChanges, User
from dayboard.policy import ensure_day_open
from dayboard.productivity import summarize_day
from dayboard.settings import Settings, get_settings
from dayboard.store import DayBoardStore

logger = logging.getLogger(__name__)

DayInput = Union[date, datetime, str]


@dataclass(frozen=True)
class Session:
    """A freshly issued bearer token and its user."""

    token: str
    user: User


@dataclass(frozen=True)
class PublicCalendar:
    user: PublicUser
    day_records: list[DayRecord]


class DayBoardService:
    """
    Productivity tracker operations.

    Usage:
        async with DayBoardStore(url) as store:
            service = DayBoardService(store)
            session = await service.register("ada", "ada@example.com", "secret1")
            task = await service.create_task(session.user.id, "Read", 4, "2024-02-01")
            record = await service.end_day(session.user.id, "2024-02-01")
    """

    def __init__(self, store: DayBoardStore, settings: Settings | None = None) -> None:
        self._store = store
        self._settings = settings or get_settings()

    @property
    def store(self) -> DayBoardStore:
        return self._store

    # =========================================================================
    # Auth
    # =========================================================================

    async def register(self, username: str, email: str, password: str) -> Session:
        """
        Create an account and sign it in.

        Raises:
            DayBoardValidationError: Bad username, email or password
            DayBoardConflictError: Username or email already registered
        """
        username = username.strip()
        email = email.strip().lower()

        if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
            raise DayBoardValidationError(
                f"Username must be {USERNAME_MIN_LENGTH}-{USERNAME_MAX_LENGTH} characters"
            )
        if not validate_email(email):
            raise DayBoardValidationError("Invalid email format")
        if len(password) < PASSWORD_MIN_LENGTH:
            raise DayBoardValidationError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
            )

        user = await self._store.create_user(
            username,
            email,
            hash_password(password, iterations=self._settings.password_hash_iterations),
        )
        logger.info("Registered user %s (%s)", user.username, user.id)
        return await self._issue_token(user)

    async def login(self, email: str, password: str) -> Session:
        credentials = await self._store.get_credentials(email.strip().lower())
        if credentials is None or not verify_password(password, credentials[1]):
            raise DayBoardAuthenticationError("Invalid email or password")
        return await self._issue_token(credentials[0])

    async def logout(self, token: str) -> None:
        await self._store.delete_token(token)

    async def authenticate(self, token: str) -> User:
        """
        Resolve a bearer token to its user.

        Raises:
            DayBoardAuthenticationError: Unknown or expired token
        """
        user = await self._store.get_token_user(token)
        if user is None:
            raise DayBoardAuthenticationError("Not authorized, token failed")
        return user

    async def update_profile(self, user_id: str, *, profile_visible: bool) -> User:
        user = await self._store.set_profile_visible(user_id, profile_visible)
        if user is None:
            raise DayBoardNotFoundError("User not found", resource_type="user", resource_id=user_id)
        return user

    async def _issue_token(self, user: User) -> Session:
        token = generate_token()
        expires_at = utc_now() + timedelta(hours=self._settings.token_ttl_hours)
        await self._store.create_token(user.id, token, expires_at)
        return Session(token=token, user=user)

    async def _get_visible_user(self, user_id: str) -> User:
        user = await self._store.get_user(user_id)
        if user is None or not user.profile_visible:
            raise DayBoardNotFoundError(
                "User not found or profile not visible",
                resource_type="user",
                resource_id=user_id,
            )
        return user

    # =========================================================================
    # Tasks
    # =========================================================================

    async def create_task(
        self,
        user_id: str,
        title: str,
        total_items: int,
        day: DayInput,
        *,
        description: Optional[str] = None,
    ) -> Task:
        """
        Create a task for a day that has not been ended.

        Raises:
            DayBoardValidationError: Missing title or total_items < 1
            DayEndedError: The day has been ended
        """
        title = (title or "").strip()
        if not title:
            raise DayBoardValidationError("Title is required")
        if total_items < 1:
            raise DayBoardValidationError("Total items must be at least 1")

        task_day = to_day(day)
        await ensure_day_open(self._store, user_id, task_day, "create")

        task = await self._store.create_task(
            user_id, title, total_items, task_day, description=description
        )
        logger.info("Created task %s for user %s on %s", task.id, user_id, task_day)
        return task

    async def get_task(self, user_id: str, task_id: str) -> Task:
        task = await self._store.get_task(task_id, user_id)
        if task is None:
            raise DayBoardNotFoundError("Task not found", resource_type="task", resource_id=task_id)
        return task

    async def list_tasks(self, user_id: str, day: Optional[DayInput] = None) -> list[Task]:
        """A user's tasks, newest first, optionally only those of ``day``."""
        return await self._store.list_tasks(user_id, to_day(day) if day else None)

    async def list_public_tasks(self, user_id: str, day: Optional[DayInput] = None) -> list[Task]:
        """
        Another user's tasks, if their profile is visible.

        Raises:
            DayBoardNotFoundError: Unknown user or private profile
        """
        await self._get_visible_user(user_id)
        return await self.list_tasks(user_id, day)

    async def update_task(self, user_id: str, task_id: str, changes: TaskChanges) -> Task:
        """
        Apply a partial update to a task.

        Shrinking total_items below the current completed_items clamps
        completed_items down, unless completed_items is part of the update.

        Raises:
            DayBoardNotFoundError: Task missing or owned by someone else
            DayEndedError: The task's day has been ended
            DayBoardValidationError: completed_items would exceed total_items
        """
        task = await self.get_task(user_id, task_id)
        await ensure_day_open(self._store, user_id, task.date, "update")

        updates: dict = {}

        if changes.title is not None:
            title = changes.title.strip()
            if not title:
                raise DayBoardValidationError("Title is required")
            updates["title"] = title
        if changes.description is not None:
            updates["description"] = changes.description
        if changes.note is not None:
            updates["note"] = changes.note

        total = task.total_items
        if changes.total_items is not None:
            if changes.total_items < 1:
                raise DayBoardValidationError("Total items must be at least 1")
            total = changes.total_items

        if changes.completed_items is not None:
            completed = changes.completed_items
        else:
            completed = min(task.completed_items, total)

        if completed < 0:
            raise DayBoardValidationError("Completed items cannot be negative")
        if completed > total:
            raise DayBoardValidationError("Completed items cannot exceed total items")

        updates["total_items"] = total
        updates["completed_items"] = completed

        saved = await self._store.save_task(task.model_copy(update=updates))
        if saved is None:
            raise DayBoardNotFoundError("Task not found", resource_type="task", resource_id=task_id)
        return saved

    async def update_progress(
        self,
        user_id: str,
        task_id: str,
        completed_items: int,
        note: Optional[str] = None,
    ) -> Task:
        """Set a task's completed item count and, optionally, its note."""
        return await self.update_task(
            user_id,
            task_id,
            TaskChanges(completed_items=completed_items, note=note),
        )

    async def delete_task(self, user_id: str, task_id: str) -> None:
        task = await self.get_task(user_id, task_id)
        await ensure_day_open(self._store, user_id, task.date, "delete")
        if not await self._store.delete_task(task_id, user_id):
            raise DayBoardNotFoundError("Task not found", resource_type="task", resource_id=task_id)
        logger.info("Deleted task %s for user %s", task_id, user_id)

    # =========================================================================
    # Day Records
    # =========================================================================

    async def end_day(self, user_id: str, day: DayInput, summary: Optional[str] = None) -> DayRecord:
        """
        End a day: score its tasks and lock it for good.

        Raises:
            DayAlreadyEndedError: The day was already ended
        """
        record_day = to_day(day)

        existing = await self._store.get_day_record(user_id, record_day)
        if existing is not None and existing.is_ended:
            raise DayAlreadyEndedError(user_id, record_day)

        tasks = await self._store.list_tasks(user_id, record_day)
        scored = summarize_day(tasks)

        record = await self._store.finalize_day(
            user_id,
            record_day,
            scored,
            text=(summary or "").strip(),
        )
        logger.info(
            "Ended day %s for user %s: %d/%d tasks, %d%% (%s)",
            record_day,
            user_id,
            record.completed_tasks,
            record.total_tasks,
            record.overall_productivity,
            record.productivity_label.value,
        )
        return record

    async def get_day_record(self, user_id: str, day: DayInput) -> DayRecord:
        record = await self._store.get_day_record(user_id, to_day(day))
        if record is None:
            raise DayBoardNotFoundError("Day record not found", resource_type="day_record")
        return record

    async def get_calendar(
        self,
        user_id: str,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> list[DayRecord]:
        """Ended day records of one month (default: the current one)."""
        start, end = month_bounds(month, year)
        return await self._store.list_ended_day_records(user_id, start, end)

    async def get_public_calendar(
        self,
        user_id: str,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> PublicCalendar:
        """
        Another user's month of ended days, if their profile is visible.

        Raises:
            DayBoardNotFoundError: Unknown user or private profile
        """
        user = await self._get_visible_user(user_id)
        records = await self.get_calendar(user_id, month, year)
        public = PublicUser(id=user.id, username=user.username, profile_visible=user.profile_visible)
        return PublicCalendar(user=public, day_records=records)

    async def list_visible_users(self) -> list[PublicUser]:
        return await self._store.list_visible_users()
