"""
Pytest Configuration and Fixtures for DayBoard Tests.

This module provides fixtures, factories and shared utilities for testing
the DayBoard store, service and REST API.

Architecture:
    - Store: DayBoardStore on a temporary SQLite file (aiosqlite)
    - Service: DayBoardService over that store
    - HTTP: httpx AsyncClient talking to the FastAPI app in-process
    - Factories: Generate users, tasks and Task models
    - Markers: Custom pytest markers for test categorization
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, AsyncIterator

import httpx
import pytest

from dayboard.api import create_app
from dayboard.models import Task
from dayboard.productivity import completion_percentage
from dayboard.service import DayBoardService, Session
from dayboard.settings import Settings
from dayboard.store import DayBoardStore, new_id


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Tests that hit the store")
    config.addinivalue_line("markers", "api: REST API tests")
    config.addinivalue_line("markers", "tasks: Task-related tests")
    config.addinivalue_line("markers", "days: Day record and calendar tests")
    config.addinivalue_line("markers", "auth: Auth-related tests")
    config.addinivalue_line("markers", "productivity: Scoring tests")


# =============================================================================
# Time Utilities
# =============================================================================


DAY = date(2024, 2, 1)
OTHER_DAY = date(2024, 2, 2)


def utc_now() -> datetime:
    """Get current UTC time."""
    return datetime.now(timezone.utc)


# =============================================================================
# Test Data Factories
# =============================================================================


class TaskFactory:
    """Factory for creating Task models without touching the store."""

    @staticmethod
    def create(
        total_items: int = 4,
        completed_items: int = 0,
        title: str = "Test Task",
        day: date = DAY,
        user_id: str | None = None,
        **kwargs: Any,
    ) -> Task:
        """Create a Task with derived fields filled in consistently."""
        percentage = completion_percentage(completed_items, total_items)
        return Task(
            id=new_id(),
            user_id=user_id or new_id(),
            title=title,
            total_items=total_items,
            completed_items=completed_items,
            completion_percentage=percentage,
            is_completed=percentage == 100,
            date=day,
            created_at=utc_now(),
            **kwargs,
        )

    @staticmethod
    def create_completed(total_items: int = 4, **kwargs: Any) -> Task:
        return TaskFactory.create(total_items=total_items, completed_items=total_items, **kwargs)


class UserFactory:
    """Factory registering users through the service."""

    _counter: int = 0

    @classmethod
    def next_username(cls) -> str:
        cls._counter += 1
        return f"user{cls._counter:04d}"

    @classmethod
    async def register(
        cls,
        service: DayBoardService,
        username: str | None = None,
        password: str = "secret123",
        *,
        profile_visible: bool = True,
    ) -> Session:
        """Register a user and return its session."""
        username = username or cls.next_username()
        session = await service.register(username, f"{username}@example.com", password)
        if not profile_visible:
            user = await service.update_profile(session.user.id, profile_visible=False)
            session = Session(token=session.token, user=user)
        return session


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'dayboard-test.db'}",
        password_hash_iterations=1_000,
        token_ttl_hours=1,
    )


@pytest.fixture
async def store(settings: Settings) -> AsyncIterator[DayBoardStore]:
    """Create a connected store on an empty database."""
    async with DayBoardStore(settings.database_url) as store:
        yield store


@pytest.fixture
def service(store: DayBoardStore, settings: Settings) -> DayBoardService:
    return DayBoardService(store, settings)


@pytest.fixture
def app(settings: Settings, store: DayBoardStore):
    """FastAPI app sharing the test store."""
    return create_app(settings, store)


@pytest.fixture
async def http(app) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client bound to the app in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def alice(service: DayBoardService) -> Session:
    """Session of a registered user with a visible profile."""
    return await UserFactory.register(service, "alice")


@pytest.fixture
async def bob(service: DayBoardService) -> Session:
    return await UserFactory.register(service, "bob")


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def task_factory() -> type[TaskFactory]:
    """Provide TaskFactory class."""
    return TaskFactory


@pytest.fixture
def user_factory() -> type[UserFactory]:
    """Provide UserFactory class."""
    return UserFactory
