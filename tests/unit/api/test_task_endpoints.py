"""
Name: Task and User Endpoint Tests

Responsibilities:
  - /tasks CRUD with owner/admin policy: 201/200/204, 400, 403, 404
  - Client-supplied userId never changes the owner
  - /users: Admin only
  - /api alias, health check, security headers, body limit
"""

import pytest
from fastapi.testclient import TestClient

from taskmanager.api.main import create_app
from taskmanager.container import get_token_service, get_user_repository
from taskmanager.identity.users import UserRole

pytestmark = pytest.mark.unit


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def _auth(email: str, role: UserRole = UserRole.USER) -> dict[str, str]:
    repo = get_user_repository()
    user = repo.get_user_by_email(email) or repo.create_user(
        email=email, password_hash="unused", role=role
    )
    return {"Authorization": f"Bearer {get_token_service().issue(user)}"}


@pytest.fixture
def alice_h() -> dict[str, str]:
    return _auth("alice@example.com")


@pytest.fixture
def bob_h() -> dict[str, str]:
    return _auth("bob@example.com")


@pytest.fixture
def admin_h() -> dict[str, str]:
    return _auth("admin@example.com", UserRole.ADMIN)


def _create(client, headers, **payload):
    body = {"title": "Write report", **payload}
    response = client.post("/tasks", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def _user_id(email: str) -> int:
    return get_user_repository().get_user_by_email(email).id


class TestCreate:
    def test_create_defaults(self, client, alice_h):
        task = _create(client, alice_h)

        assert task["title"] == "Write report"
        assert task["description"] == ""
        assert task["status"] == "Pending"
        assert task["userId"] == _user_id("alice@example.com")
        assert set(task) == {"id", "title", "description", "status", "userId"}

    def test_user_id_in_body_is_ignored(self, client, alice_h, bob_h):
        task = _create(client, alice_h, userId=_user_id("bob@example.com"))

        assert task["userId"] == _user_id("alice@example.com")

    def test_status_canonicalized(self, client, alice_h):
        task = _create(client, alice_h, status="inprogress")

        assert task["status"] == "InProgress"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"title": ""},
            {"title": "   "},
            {"title": "x" * 201},
            {"title": "ok", "description": "d" * 1001},
            {"title": "ok", "status": "Done"},
            {"title": "ok", "status": None},
        ],
    )
    def test_invalid_payload_is_400(self, client, alice_h, payload):
        response = client.post("/tasks", json=payload, headers=alice_h)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_requires_token(self, client):
        response = client.post("/tasks", json={"title": "t"})

        assert response.status_code == 401


class TestReadAndList:
    def test_owner_gets_task(self, client, alice_h):
        task = _create(client, alice_h)

        response = client.get(f"/tasks/{task['id']}", headers=alice_h)

        assert response.status_code == 200
        assert response.json() == task

    def test_other_user_gets_403(self, client, alice_h, bob_h):
        task = _create(client, alice_h)

        response = client.get(f"/tasks/{task['id']}", headers=bob_h)

        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_missing_task_is_404(self, client, bob_h):
        response = client.get("/tasks/999", headers=bob_h)

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_admin_gets_any_task(self, client, alice_h, admin_h):
        task = _create(client, alice_h)

        assert client.get(f"/tasks/{task['id']}", headers=admin_h).status_code == 200

    def test_list_is_scoped(self, client, alice_h, bob_h, admin_h):
        _create(client, alice_h, title="a1")
        _create(client, bob_h, title="b1")

        alice_titles = [t["title"] for t in client.get("/tasks", headers=alice_h).json()]
        admin_titles = [t["title"] for t in client.get("/tasks", headers=admin_h).json()]

        assert alice_titles == ["a1"]
        assert sorted(admin_titles) == ["a1", "b1"]

    def test_list_empty(self, client, alice_h):
        response = client.get("/tasks", headers=alice_h)

        assert response.status_code == 200
        assert response.json() == []


class TestUpdate:
    def test_partial_update(self, client, alice_h):
        task = _create(client, alice_h, description="keep")

        response = client.put(
            f"/tasks/{task['id']}", json={"status": "Completed"}, headers=alice_h
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "Completed"
        assert body["description"] == "keep"
        assert body["title"] == task["title"]

    def test_user_id_cannot_be_reassigned(self, client, alice_h, bob_h):
        task = _create(client, alice_h)

        body = client.put(
            f"/tasks/{task['id']}",
            json={"title": "renamed", "userId": _user_id("bob@example.com")},
            headers=alice_h,
        ).json()

        assert body["userId"] == task["userId"]

    def test_other_user_gets_403_and_nothing_changes(self, client, alice_h, bob_h):
        task = _create(client, alice_h)

        response = client.put(
            f"/tasks/{task['id']}", json={"title": "hijack"}, headers=bob_h
        )

        assert response.status_code == 403
        assert client.get(f"/tasks/{task['id']}", headers=alice_h).json()["title"] == task["title"]

    def test_admin_can_update(self, client, alice_h, admin_h):
        task = _create(client, alice_h)

        response = client.put(
            f"/tasks/{task['id']}", json={"status": "InProgress"}, headers=admin_h
        )

        assert response.status_code == 200
        assert response.json()["userId"] == task["userId"]

    def test_invalid_status_is_400(self, client, alice_h):
        task = _create(client, alice_h)

        response = client.put(
            f"/tasks/{task['id']}", json={"status": "Archived"}, headers=alice_h
        )

        assert response.status_code == 400
        assert "Pending, InProgress, Completed" in response.json()["detail"]

    @pytest.mark.parametrize("caller", ["alice_h", "admin_h"])
    def test_missing_task_is_404_for_any_role(self, client, request, caller):
        headers = request.getfixturevalue(caller)

        response = client.put("/tasks/999", json={"title": "x"}, headers=headers)

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"


class TestDelete:
    def test_owner_deletes_then_404(self, client, alice_h):
        task = _create(client, alice_h)

        first = client.delete(f"/tasks/{task['id']}", headers=alice_h)
        second = client.delete(f"/tasks/{task['id']}", headers=alice_h)

        assert first.status_code == 204
        assert first.content == b""
        assert second.status_code == 404

    def test_other_user_gets_403(self, client, alice_h, bob_h):
        task = _create(client, alice_h)

        response = client.delete(f"/tasks/{task['id']}", headers=bob_h)

        assert response.status_code == 403
        assert client.get(f"/tasks/{task['id']}", headers=alice_h).status_code == 200

    def test_admin_deletes_any(self, client, alice_h, admin_h):
        task = _create(client, alice_h)

        assert client.delete(f"/tasks/{task['id']}", headers=admin_h).status_code == 204

    @pytest.mark.parametrize("caller", ["bob_h", "admin_h"])
    def test_missing_task_is_404_for_any_role(self, client, request, caller):
        headers = request.getfixturevalue(caller)

        response = client.delete("/tasks/999", headers=headers)

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    @pytest.mark.parametrize("method", ["get", "put", "delete"])
    def test_non_numeric_id_is_404(self, client, alice_h, method):
        kwargs = {"json": {"title": "x"}} if method == "put" else {}

        response = getattr(client, method)("/tasks/abc", headers=alice_h, **kwargs)

        assert response.status_code == 404


class TestUsers:
    def test_admin_lists_users_without_hashes(self, client, alice_h, admin_h):
        response = client.get("/users", headers=admin_h)

        assert response.status_code == 200
        users = response.json()
        assert {u["email"] for u in users} == {"alice@example.com", "admin@example.com"}
        assert all(set(u) == {"id", "email", "role"} for u in users)

    def test_regular_user_gets_403(self, client, alice_h):
        response = client.get("/users", headers=alice_h)

        assert response.status_code == 403

    def test_anonymous_gets_401(self, client):
        assert client.get("/users").status_code == 401


class TestApiAliasAndCrosscutting:
    def test_api_prefix_serves_same_routes(self, client, alice_h):
        created = client.post("/api/tasks", json={"title": "via alias"}, headers=alice_h)

        assert created.status_code == 201
        listed = client.get("/tasks", headers=alice_h).json()
        assert [t["title"] for t in listed] == ["via alias"]

    def test_api_auth_register(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "alias@example.com", "password": "secret1"},
        )

        assert response.status_code == 201

    @pytest.mark.parametrize("path", ["/healthz", "/api/healthz"])
    def test_healthz(self, client, path):
        response = client.get(path)

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["db"] == "in_memory"

    def test_security_and_request_id_headers(self, client, alice_h):
        response = client.get("/tasks", headers=alice_h)

        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-request-id"]

    def test_body_limit_returns_413(self, client, alice_h):
        response = client.post(
            "/tasks",
            content=b"x" * (1024 * 1024 + 1),
            headers={**alice_h, "Content-Type": "application/json"},
        )

        assert response.status_code == 413
