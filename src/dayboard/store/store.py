"""
DayBoard Store.

This module provides the DayBoardStore class, the single handle to the
persisted users, tokens, tasks and day records.

Each public method runs in its own transaction and returns pydantic models,
never live ORM rows.
"""

from __future__ import annotations

import datetime as dt
import logging
import secrets
from contextlib import asynccontextmanager
from types import TracebackType
from typing import Any, AsyncIterator, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from dayboard.constants import ID_LENGTH, ProductivityLabel, UserRole
from dayboard.dates import utc_now
from dayboard.exceptions import (
    DayAlreadyEndedError,
    DayBoardConfigurationError,
    DayBoardConflictError,
)
from dayboard.models import DayRecord, DaySummary, PublicUser, Task, User
from dayboard.productivity import completion_percentage
from dayboard.store.schema import AuthTokenRow, Base, DayRecordRow, TaskRow, UserRow

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="DayBoardStore")


def new_id() -> str:
    """Generate a 24-character hex record id."""
    return secrets.token_hex(ID_LENGTH // 2)


class DayBoardStore:
    """
    Async persistence for DayBoard.

    Usage:
        async with DayBoardStore("sqlite+aiosqlite:///./dayboard.db") as store:
            user = await store.get_user(user_id)
            tasks = await store.list_tasks(user_id, day=date(2024, 2, 1))
    """

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self._database_url = database_url
        self._echo = echo
        self._engine: AsyncEngine | None = None
        self._sessions: async_sessionmaker[AsyncSession] | None = None

    # =========================================================================
    # Initialization & Lifecycle
    # =========================================================================

    async def connect(self) -> None:
        """
        Create the engine and make sure all tables exist.

        Safe to call more than once.
        """
        if self._engine is not None:
            return

        self._engine = create_async_engine(self._database_url, echo=self._echo)
        self._sessions = async_sessionmaker(self._engine, expire_on_commit=False)

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Store connected (%s)", self._engine.url.render_as_string(hide_password=True))

    async def disconnect(self) -> None:
        """Dispose the engine and its connection pool."""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Store disconnected")
        self._engine = None
        self._sessions = None

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    async def __aenter__(self: T) -> T:
        """Enter async context manager."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context manager."""
        await self.disconnect()

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        if self._sessions is None:
            raise DayBoardConfigurationError(
                "Store not connected. Use 'await store.connect()' or async context manager."
            )
        async with self._sessions() as session:
            async with session.begin():
                yield session

    # =========================================================================
    # Users
    # =========================================================================

    async def create_user(
        self,
        username: str,
        email: str,
        password_hash: str,
        *,
        role: UserRole = UserRole.USER,
        profile_visible: bool = True,
    ) -> User:
        """
        Insert a user.

        Raises:
            DayBoardConflictError: Username or email already taken
        """
        row = UserRow(
            id=new_id(),
            username=username,
            email=email,
            password_hash=password_hash,
            role=role.value,
            profile_visible=profile_visible,
            created_at=utc_now(),
        )
        try:
            async with self._transaction() as session:
                session.add(row)
        except IntegrityError as e:
            raise DayBoardConflictError("User already exists", details={"username": username}) from e
        return User.model_validate(row)

    async def get_user(self, user_id: str) -> User | None:
        async with self._transaction() as session:
            row = await session.get(UserRow, user_id)
            return User.model_validate(row) if row else None

    async def get_credentials(self, email: str) -> tuple[User, str] | None:
        """Get a user and their password hash by email."""
        async with self._transaction() as session:
            row = await session.scalar(select(UserRow).where(UserRow.email == email))
            if row is None:
                return None
            return User.model_validate(row), row.password_hash

    async def set_profile_visible(self, user_id: str, visible: bool) -> User | None:
        async with self._transaction() as session:
            row = await session.get(UserRow, user_id)
            if row is None:
                return None
            row.profile_visible = visible
            return User.model_validate(row)

    async def list_visible_users(self) -> list[PublicUser]:
        """Users with a public profile, sorted by username."""
        async with self._transaction() as session:
            rows = await session.scalars(
                select(UserRow).where(UserRow.profile_visible.is_(True)).order_by(UserRow.username)
            )
            return [PublicUser.model_validate(row) for row in rows]

    # =========================================================================
    # Auth Tokens
    # =========================================================================

    async def create_token(self, user_id: str, token: str, expires_at: dt.datetime) -> None:
        async with self._transaction() as session:
            session.add(AuthTokenRow(token=token, user_id=user_id, expires_at=expires_at))

    async def get_token_user(self, token: str, now: dt.datetime | None = None) -> User | None:
        """Get the owner of a token that has not expired yet."""
        now = now or utc_now()
        async with self._transaction() as session:
            row = await session.scalar(
                select(UserRow)
                .join(AuthTokenRow, AuthTokenRow.user_id == UserRow.id)
                .where(AuthTokenRow.token == token, AuthTokenRow.expires_at > now)
            )
            return User.model_validate(row) if row else None

    async def delete_token(self, token: str) -> None:
        async with self._transaction() as session:
            await session.execute(delete(AuthTokenRow).where(AuthTokenRow.token == token))

    # =========================================================================
    # Tasks
    # =========================================================================

    async def create_task(
        self,
        user_id: str,
        title: str,
        total_items: int,
        day: dt.date,
        *,
        description: str | None = None,
        completed_items: int = 0,
        note: str | None = None,
        created_at: dt.datetime | None = None,
    ) -> Task:
        percentage = completion_percentage(completed_items, total_items)
        row = TaskRow(
            id=new_id(),
            user_id=user_id,
            title=title,
            description=description,
            total_items=total_items,
            completed_items=completed_items,
            completion_percentage=percentage,
            is_completed=percentage == 100,
            note=note,
            date=day,
            created_at=created_at or utc_now(),
        )
        async with self._transaction() as session:
            session.add(row)
        return Task.model_validate(row)

    async def get_task(self, task_id: str, user_id: str) -> Task | None:
        """Get a task only if it belongs to ``user_id``."""
        async with self._transaction() as session:
            row = await session.scalar(
                select(TaskRow).where(TaskRow.id == task_id, TaskRow.user_id == user_id)
            )
            return Task.model_validate(row) if row else None

    async def list_tasks(self, user_id: str, day: dt.date | None = None) -> list[Task]:
        """A user's tasks, newest first, optionally for one day only."""
        query = select(TaskRow).where(TaskRow.user_id == user_id)
        if day is not None:
            query = query.where(TaskRow.date == day)
        query = query.order_by(TaskRow.created_at.desc())

        async with self._transaction() as session:
            rows = await session.scalars(query)
            return [Task.model_validate(row) for row in rows]

    async def save_task(self, task: Task) -> Task | None:
        """
        Write a task's editable fields back, recomputing the derived ones.

        Returns:
            The stored task, or None if it no longer exists
        """
        percentage = completion_percentage(task.completed_items, task.total_items)
        async with self._transaction() as session:
            row = await session.get(TaskRow, task.id)
            if row is None:
                return None
            row.title = task.title
            row.description = task.description
            row.total_items = task.total_items
            row.completed_items = task.completed_items
            row.note = task.note
            row.completion_percentage = percentage
            row.is_completed = percentage == 100
            return Task.model_validate(row)

    async def delete_task(self, task_id: str, user_id: str) -> bool:
        async with self._transaction() as session:
            result = await session.execute(
                delete(TaskRow).where(TaskRow.id == task_id, TaskRow.user_id == user_id)
            )
            return result.rowcount > 0

    # =========================================================================
    # Day Records
    # =========================================================================

    async def get_day_record(self, user_id: str, day: dt.date) -> DayRecord | None:
        async with self._transaction() as session:
            row = await session.scalar(
                select(DayRecordRow).where(DayRecordRow.user_id == user_id, DayRecordRow.date == day)
            )
            return DayRecord.model_validate(row) if row else None

    async def list_ended_day_records(self, user_id: str, start: dt.date, end: dt.date) -> list[DayRecord]:
        """Ended records dated within [start, end], oldest first."""
        async with self._transaction() as session:
            rows = await session.scalars(
                select(DayRecordRow)
                .where(
                    DayRecordRow.user_id == user_id,
                    DayRecordRow.is_ended.is_(True),
                    DayRecordRow.date >= start,
                    DayRecordRow.date <= end,
                )
                .order_by(DayRecordRow.date)
            )
            return [DayRecord.model_validate(row) for row in rows]

    async def finalize_day(
        self,
        user_id: str,
        day: dt.date,
        summary: DaySummary,
        *,
        text: str = "",
        ended_at: dt.datetime | None = None,
    ) -> DayRecord:
        """
        End a day with a single conditional write.

        An existing record is overwritten only while it is not ended; a
        missing one is inserted. Losing a race against a concurrent end-day
        surfaces as the unique (user, date) constraint firing.

        Raises:
            DayAlreadyEndedError: The day was already ended
        """
        values: dict[str, Any] = {
            "is_ended": True,
            "ended_at": ended_at or utc_now(),
            "total_tasks": summary.total_tasks,
            "completed_tasks": summary.completed_tasks,
            "overall_productivity": summary.overall_productivity,
            "productivity_label": ProductivityLabel(summary.productivity_label).value,
            "summary": text,
        }
        match = (DayRecordRow.user_id == user_id, DayRecordRow.date == day)

        try:
            async with self._transaction() as session:
                result = await session.execute(
                    update(DayRecordRow)
                    .where(*match, DayRecordRow.is_ended.is_(False))
                    .values(**values)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount == 0:
                    existing = await session.scalar(select(DayRecordRow.id).where(*match))
                    if existing is not None:
                        raise DayAlreadyEndedError(user_id, day)
                    session.add(DayRecordRow(id=new_id(), user_id=user_id, date=day, **values))
                    await session.flush()

                row = await session.scalar(select(DayRecordRow).where(*match))
                record = DayRecord.model_validate(row)
        except IntegrityError as e:
            logger.warning("Concurrent end-day for user %s on %s lost the race", user_id, day)
            raise DayAlreadyEndedError(user_id, day) from e

        return record
