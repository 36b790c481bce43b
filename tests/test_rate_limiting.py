"""
Tests for per-client rate limiting.

The limiter is switched off for the rest of the suite; these tests turn
it on and clear its counters before and after each test. The default
limit under test is 5/minute (see conftest).
"""

import pytest

from app.core.config import settings
from app.shared.security.rate_limiting import limiter

LIMIT = int(settings.rate_limit_default.split("/")[0])


@pytest.fixture
def limited(monkeypatch):
    monkeypatch.setattr(limiter, "enabled", True)
    limiter.reset()
    yield limiter
    limiter.reset()


class TestRouterRoutesAreLimited:
    def test_list_tasks_answers_429_envelope_past_the_limit(self, client, limited) -> None:
        statuses = [client.get("/tasks").status_code for _ in range(LIMIT)]
        assert statuses == [200] * LIMIT

        response = client.get("/tasks")
        assert response.status_code == 429
        assert response.json() == {
            "success": False,
            "message": f"Rate limit exceeded: {LIMIT} per 1 minute",
        }

    def test_users_and_health_are_limited_too(self, client, limited) -> None:
        for path in ("/users", "/health"):
            for _ in range(LIMIT):
                assert client.get(path).status_code == 200
            assert client.get(path).status_code == 429

    def test_rejected_write_reaches_no_repository(self, client, limited, task_repository) -> None:
        for index in range(LIMIT):
            assert client.post("/tasks", json={"title": f"task {index}"}).status_code == 201
        assert client.post("/tasks", json={"title": "one too many"}).status_code == 429
        assert task_repository.writes == LIMIT


class TestDisabledLimiter:
    def test_no_limit_when_disabled(self, client) -> None:
        limiter.reset()
        for _ in range(LIMIT + 2):
            assert client.get("/tasks").status_code == 200
