"""
Tests for the user API endpoints.

Email uniqueness is enforced by the in-memory repository the same way
the unique index does it: the write fails with a duplicate-key fault.
"""

from app.domain.errors import StoreError
from app.interfaces.users.dependencies import get_user_service
from app.main import app

MISSING_ID = "65a1f0c2e4b0a1b2c3d4e5f6"


def _create(client, name="Ada Lovelace", email="ada@acme.io"):
    response = client.post("/users", json={"name": name, "email": email})
    assert response.status_code == 200
    return response.json()["data"]


class TestCreateUser:
    """Tests for POST /users."""

    def test_email_is_normalized(self, client) -> None:
        response = client.post("/users", json={"name": " Ada ", "email": "  Ada@ACME.io  "})
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User created successfully"
        assert body["data"]["email"] == "ada@acme.io"
        assert body["data"]["name"] == "Ada"

    def test_duplicate_email_after_normalization_is_conflict(self, client) -> None:
        _create(client, email="ada@acme.io")
        response = client.post("/users", json={"name": "Other Ada", "email": " ADA@acme.IO"})
        assert response.status_code == 409
        assert response.json() == {"success": False, "message": "Email already exists"}

    def test_invalid_email(self, client) -> None:
        response = client.post("/users", json={"name": "Ada", "email": "nope"})
        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "body.email", "message": "Invalid email format"}
        ]

    def test_missing_fields(self, client) -> None:
        response = client.post("/users", json={})
        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "body.name", "message": "Name is required"},
            {"field": "body.email", "message": "Email is required"},
        ]


class TestListUsers:
    """Tests for GET /users."""

    def test_insertion_order(self, client) -> None:
        first = _create(client, email="a@acme.io")
        second = _create(client, email="b@acme.io")
        response = client.get("/users")
        assert response.status_code == 200
        assert response.json()["message"] == "Users retrieved successfully"
        assert [u["id"] for u in response.json()["data"]] == [first["id"], second["id"]]


class TestUserById:
    """Tests for GET/PUT/DELETE /users/{id}."""

    def test_get(self, client) -> None:
        user = _create(client)
        response = client.get(f"/users/{user['id']}")
        assert response.status_code == 200
        assert response.json()["data"] == user

    def test_get_missing(self, client) -> None:
        response = client.get(f"/users/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "User not found"}

    def test_update_to_taken_email_is_conflict(self, client) -> None:
        _create(client, email="a@acme.io")
        other = _create(client, email="b@acme.io")
        response = client.put(f"/users/{other['id']}", json={"email": "A@acme.io"})
        assert response.status_code == 409
        assert response.json()["message"] == "Email already exists"

    def test_update_name(self, client) -> None:
        user = _create(client)
        response = client.put(f"/users/{user['id']}", json={"name": "Countess Ada"})
        assert response.status_code == 200
        assert response.json()["message"] == "User updated successfully"
        assert response.json()["data"]["name"] == "Countess Ada"
        assert response.json()["data"]["email"] == user["email"]

    def test_delete(self, client) -> None:
        user = _create(client)
        response = client.delete(f"/users/{user['id']}")
        assert response.status_code == 200
        assert response.json()["message"] == "User deleted successfully"
        assert client.delete(f"/users/{user['id']}").status_code == 404

    def test_malformed_id(self, client) -> None:
        response = client.get("/users/xyz")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid data format"


class TestStoreFailure:
    def test_store_fault_is_generic_500(self, client) -> None:
        class BrokenService:
            async def list_users(self):
                raise StoreError()

        app.dependency_overrides[get_user_service] = lambda: BrokenService()
        response = client.get("/users")
        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Document store operation failed",
        }
