"""
Shared fixtures.

HTTP tests run against the real application with the service providers
overridden: services are backed by in-memory repositories implementing
the same ports, so no MongoDB server is needed. The application
lifespan is never entered (TestClient is not used as a context manager).
"""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("RATE_LIMIT_DEFAULT", "5/minute")

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.application.tasks.task_service import TaskService
from app.application.users.user_service import UserService
from app.domain.errors import CastError, DuplicateKeyError
from app.domain.tasks.entities import Task
from app.domain.tasks.ports import TaskRepository
from app.domain.users.entities import User
from app.domain.users.ports import UserRepository
from app.interfaces.tasks.dependencies import get_task_service
from app.interfaces.users.dependencies import get_user_service
from app.main import app


class _Clock:
    """Strictly increasing timestamps so ordering by creation is stable."""

    def __init__(self) -> None:
        self._now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def tick(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


def _check_id(value: str) -> str:
    if not ObjectId.is_valid(value):
        raise CastError(value)
    return value


class InMemoryTaskRepository(TaskRepository):
    """TaskRepository port backed by a dict."""

    def __init__(self) -> None:
        self.tasks: dict[str, Task] = {}
        self.writes = 0
        self._clock = _Clock()

    async def list_all(self, newest_first: bool = True) -> list[Task]:
        return sorted(
            self.tasks.values(), key=lambda t: t.created_at, reverse=newest_first
        )

    async def add(
        self, title: str, description: Optional[str], completed: bool
    ) -> Task:
        now = self._clock.tick()
        task = Task(
            id=str(ObjectId()),
            title=title,
            description=description,
            completed=completed,
            created_at=now,
            updated_at=now,
        )
        self.tasks[task.id] = task
        self.writes += 1
        return task

    async def get(self, task_id: str) -> Optional[Task]:
        return self.tasks.get(_check_id(task_id))

    async def update(self, task_id: str, changes: dict[str, Any]) -> Optional[Task]:
        current = self.tasks.get(_check_id(task_id))
        if current is None:
            return None
        fields = {**current.__dict__, **changes, "updated_at": self._clock.tick()}
        updated = Task(**fields)
        self.tasks[task_id] = updated
        self.writes += 1
        return updated

    async def delete(self, task_id: str) -> Optional[Task]:
        return self.tasks.pop(_check_id(task_id), None)


class InMemoryUserRepository(UserRepository):
    """UserRepository port backed by a dict, with a unique email "index"."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self._clock = _Clock()

    def _assert_unique(self, email: str, owner_id: Optional[str] = None) -> None:
        for user in self.users.values():
            if user.email == email and user.id != owner_id:
                raise DuplicateKeyError("email")

    async def list_all(self) -> list[User]:
        return list(self.users.values())

    async def add(self, name: str, email: str) -> User:
        self._assert_unique(email)
        now = self._clock.tick()
        user = User(
            id=str(ObjectId()), name=name, email=email, created_at=now, updated_at=now
        )
        self.users[user.id] = user
        return user

    async def get(self, user_id: str) -> Optional[User]:
        return self.users.get(_check_id(user_id))

    async def update(self, user_id: str, changes: dict[str, Any]) -> Optional[User]:
        current = self.users.get(_check_id(user_id))
        if current is None:
            return None
        if "email" in changes:
            self._assert_unique(changes["email"], owner_id=user_id)
        fields = {**current.__dict__, **changes, "updated_at": self._clock.tick()}
        updated = User(**fields)
        self.users[user_id] = updated
        return updated

    async def delete(self, user_id: str) -> Optional[User]:
        return self.users.pop(_check_id(user_id), None)


@pytest.fixture
def task_repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def client(task_repository, user_repository):
    """TestClient with services bound to the in-memory repositories."""
    app.dependency_overrides[get_task_service] = lambda: TaskService(task_repository)
    app.dependency_overrides[get_user_service] = lambda: UserService(user_repository)
    yield TestClient(app)
    app.dependency_overrides.clear()
