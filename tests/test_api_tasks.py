"""
REST API Tests: /api/tasks
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.conftest import UserFactory, auth_headers

if TYPE_CHECKING:
    import httpx

    from dayboard.service import DayBoardService, Session


pytestmark = [pytest.mark.api, pytest.mark.tasks]


async def create_task(http: httpx.AsyncClient, session: Session, **overrides) -> dict:
    body = {"title": "Solve exercises", "totalItems": 4, "date": "2024-02-01"}
    body.update(overrides)
    response = await http.post("/api/tasks", json=body, headers=auth_headers(session.token))
    assert response.status_code == 201, response.text
    return response.json()


# =============================================================================
# Create & List
# =============================================================================


class TestCreateAndList:
    async def test_create(self, http: httpx.AsyncClient, alice: Session):
        task = await create_task(http, alice, description="Chapter 3")

        assert task["title"] == "Solve exercises"
        assert task["totalItems"] == 4
        assert task["completedItems"] == 0
        assert task["completionPercentage"] == 0
        assert task["isCompleted"] is False
        assert task["date"] == "2024-02-01"
        assert task["userId"] == alice.user.id
        assert len(task["id"]) == 24

    async def test_create_from_timestamp(self, http: httpx.AsyncClient, alice: Session):
        task = await create_task(http, alice, date="2024-02-01T21:30:00.000Z")

        assert task["date"] == "2024-02-01"

    @pytest.mark.parametrize("body", [
        {"title": "Read", "totalItems": 0, "date": "2024-02-01"},
        {"title": "   ", "totalItems": 2, "date": "2024-02-01"},
        {"totalItems": 2, "date": "2024-02-01"},
        {"title": "Read", "totalItems": 2},
        {"title": "Read", "totalItems": 2, "date": "someday"},
    ])
    async def test_create_invalid(self, http: httpx.AsyncClient, alice: Session, body: dict):
        response = await http.post("/api/tasks", json=body, headers=auth_headers(alice.token))

        assert response.status_code == 400
        assert response.json()["message"]

    async def test_list_filtered_by_date(self, http: httpx.AsyncClient, alice: Session):
        await create_task(http, alice, title="Today")
        await create_task(http, alice, title="Tomorrow", date="2024-02-02")

        response = await http.get(
            "/api/tasks", params={"date": "2024-02-02"}, headers=auth_headers(alice.token)
        )

        assert response.status_code == 200
        assert [t["title"] for t in response.json()] == ["Tomorrow"]

    async def test_list_all(self, http: httpx.AsyncClient, alice: Session, bob: Session):
        await create_task(http, alice, title="Mine")
        await create_task(http, bob, title="Theirs")

        response = await http.get("/api/tasks", headers=auth_headers(alice.token))

        assert [t["title"] for t in response.json()] == ["Mine"]

    async def test_list_bad_date(self, http: httpx.AsyncClient, alice: Session):
        response = await http.get(
            "/api/tasks", params={"date": "2024-02-31"}, headers=auth_headers(alice.token)
        )

        assert response.status_code == 400


# =============================================================================
# Update, Progress & Delete
# =============================================================================


class TestUpdateAndDelete:
    async def test_progress(self, http: httpx.AsyncClient, alice: Session):
        task = await create_task(http, alice)

        response = await http.put(
            f"/api/tasks/{task['id']}/progress",
            json={"completedItems": 3, "note": "Nearly"},
            headers=auth_headers(alice.token),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["completionPercentage"] == 75
        assert data["isCompleted"] is False
        assert data["note"] == "Nearly"

    async def test_progress_over_total(self, http: httpx.AsyncClient, alice: Session):
        task = await create_task(http, alice)

        response = await http.put(
            f"/api/tasks/{task['id']}/progress",
            json={"completedItems": 5},
            headers=auth_headers(alice.token),
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Completed items cannot exceed total items"}

    async def test_progress_negative(self, http: httpx.AsyncClient, alice: Session):
        task = await create_task(http, alice)

        response = await http.put(
            f"/api/tasks/{task['id']}/progress",
            json={"completedItems": -1},
            headers=auth_headers(alice.token),
        )

        assert response.status_code == 400

    async def test_update_shrinks_total(self, http: httpx.AsyncClient, alice: Session):
        task = await create_task(http, alice, totalItems=10)
        headers = auth_headers(alice.token)
        await http.put(f"/api/tasks/{task['id']}/progress", json={"completedItems": 8}, headers=headers)

        response = await http.put(f"/api/tasks/{task['id']}", json={"totalItems": 5}, headers=headers)

        assert response.status_code == 200
        assert response.json()["completedItems"] == 5
        assert response.json()["isCompleted"] is True

    async def test_update_other_users_task(self, http: httpx.AsyncClient, alice: Session, bob: Session):
        task = await create_task(http, alice)

        response = await http.put(
            f"/api/tasks/{task['id']}", json={"title": "Mine now"}, headers=auth_headers(bob.token)
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Task not found"}

    async def test_delete(self, http: httpx.AsyncClient, alice: Session):
        task = await create_task(http, alice)

        response = await http.delete(f"/api/tasks/{task['id']}", headers=auth_headers(alice.token))

        assert response.status_code == 200
        assert response.json() == {"message": "Task deleted successfully"}
        remaining = await http.get("/api/tasks", headers=auth_headers(alice.token))
        assert remaining.json() == []

    async def test_delete_other_users_task(self, http: httpx.AsyncClient, alice: Session, bob: Session):
        task = await create_task(http, alice)

        response = await http.delete(f"/api/tasks/{task['id']}", headers=auth_headers(bob.token))

        assert response.status_code == 404


# =============================================================================
# Day Lock
# =============================================================================


class TestEndedDay:
    """Tests that task writes on an ended day are rejected."""

    async def test_task_writes_rejected(self, http: httpx.AsyncClient, alice: Session):
        headers = auth_headers(alice.token)
        task = await create_task(http, alice)
        ended = await http.post("/api/day-records/end-day", json={"date": "2024-02-01"}, headers=headers)
        assert ended.status_code == 200

        created = await http.post(
            "/api/tasks", json={"title": "Late", "totalItems": 1, "date": "2024-02-01"}, headers=headers
        )
        progressed = await http.put(
            f"/api/tasks/{task['id']}/progress", json={"completedItems": 4}, headers=headers
        )
        deleted = await http.delete(f"/api/tasks/{task['id']}", headers=headers)

        assert (created.status_code, created.json()) == (400, {"message": "Cannot add tasks to an ended day"})
        assert (progressed.status_code, progressed.json()) == (
            400,
            {"message": "Cannot update tasks for an ended day"},
        )
        assert (deleted.status_code, deleted.json()) == (400, {"message": "Cannot delete tasks from an ended day"})

        listed = await http.get("/api/tasks", params={"date": "2024-02-01"}, headers=headers)
        assert listed.json() == [task]


# =============================================================================
# Public Tasks
# =============================================================================


class TestPublicTasks:
    async def test_visible_user(self, http: httpx.AsyncClient, alice: Session):
        await create_task(http, alice)

        response = await http.get(f"/api/tasks/public/{alice.user.id}", params={"date": "2024-02-01"})

        assert response.status_code == 200
        assert len(response.json()) == 1

    async def test_private_user(self, http: httpx.AsyncClient, service: DayBoardService):
        private = await UserFactory.register(service, "hidden", profile_visible=False)

        response = await http.get(f"/api/tasks/public/{private.user.id}")

        assert response.status_code == 404
        assert response.json() == {"message": "User not found or profile not visible"}
