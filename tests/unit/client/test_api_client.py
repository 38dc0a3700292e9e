"""
Name: API Client and Session Tests

Responsibilities:
  - Bearer header attached from the session
  - Login/register persist {token, email, role}; logout clears them
  - 401 clears the session and fires the on_unauthorized callback
  - Non-2xx responses become ApiError with the problem+json code/detail
"""

import json
import stat
from unittest.mock import patch

import httpx
import pytest

from taskmanager.client import (
    ApiError,
    InMemoryCredentialStore,
    JsonFileCredentialStore,
    SessionState,
    TaskManagerClient,
)
from taskmanager.client.session import TOKEN_KEY, USER_KEY

pytestmark = pytest.mark.unit

AUTH_BODY = {"token": "tok-123", "email": "ana@example.com", "role": "User"}


def _client(handler, session: SessionState | None = None) -> TaskManagerClient:
    return TaskManagerClient(
        session or SessionState(),
        base_url="http://testserver/api",
        transport=httpx.MockTransport(handler),
    )


class TestSessionState:
    def test_login_persists_token_and_user(self):
        store = InMemoryCredentialStore()
        session = SessionState(store)

        session.login({**AUTH_BODY, "role": "Admin"})

        assert session.is_authenticated
        assert session.is_admin
        assert store.get(TOKEN_KEY) == "tok-123"
        assert json.loads(store.get(USER_KEY)) == {
            "email": "ana@example.com",
            "role": "Admin",
        }

    def test_restores_from_store(self):
        store = InMemoryCredentialStore(
            {TOKEN_KEY: "t", USER_KEY: json.dumps({"email": "a@b", "role": "User"})}
        )

        session = SessionState(store)

        assert session.token == "t"
        assert session.user.email == "a@b"
        assert session.is_admin is False

    def test_corrupt_user_entry_is_ignored(self):
        session = SessionState(InMemoryCredentialStore({USER_KEY: "{not json"}))

        assert session.user is None

    def test_logout_clears_everything(self):
        store = InMemoryCredentialStore()
        session = SessionState(store)
        session.login(AUTH_BODY)

        session.logout()

        assert session.token is None
        assert session.user is None
        assert store.get(TOKEN_KEY) is None

    def test_json_file_store_round_trip(self, tmp_path):
        path = tmp_path / "creds.json"
        SessionState(JsonFileCredentialStore(path)).login(AUTH_BODY)

        restored = SessionState(JsonFileCredentialStore(path))

        assert restored.token == "tok-123"
        assert restored.user.role == "User"

    def test_json_file_store_tightens_existing_file_to_owner_only(self, tmp_path):
        path = tmp_path / "creds.json"
        path.write_text("{}", encoding="utf-8")
        path.chmod(0o644)

        JsonFileCredentialStore(path).set(TOKEN_KEY, "tok-123")

        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_json_file_store_chmod_failure_propagates(self, tmp_path):
        store = JsonFileCredentialStore(tmp_path / "creds.json")

        with patch(
            "taskmanager.client.session.os.chmod", side_effect=PermissionError("denied")
        ):
            with pytest.raises(PermissionError):
                store.set(TOKEN_KEY, "tok-123")


class TestTaskManagerClient:
    def test_login_stores_session_and_sends_bearer_afterwards(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.path == "/api/auth/login":
                return httpx.Response(200, json=AUTH_BODY)
            return httpx.Response(200, json=[])

        client = _client(handler)
        client.login("ana@example.com", "secret1")
        client.list_tasks()

        assert "authorization" not in seen[0].headers
        assert seen[1].headers["authorization"] == "Bearer tok-123"
        assert client.session.user.email == "ana@example.com"

    def test_update_sends_only_given_fields(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["path"] = request.url.path
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": 5})

        _client(handler).update_task(5, status="Completed")

        assert captured == {
            "method": "PUT",
            "path": "/api/tasks/5",
            "body": {"status": "Completed"},
        }

    def test_delete_accepts_204(self):
        client = _client(lambda request: httpx.Response(204))

        assert client.delete_task(1) is None

    def test_401_clears_session_and_calls_back(self):
        calls = []
        session = SessionState(on_unauthorized=lambda: calls.append("login"))
        session.login(AUTH_BODY)

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                401,
                json={"code": "UNAUTHORIZED", "detail": "Token ausente, inválido o expirado."},
            )

        with pytest.raises(ApiError) as exc_info:
            _client(handler, session).list_tasks()

        assert exc_info.value.status_code == 401
        assert session.is_authenticated is False
        assert calls == ["login"]

    def test_problem_json_becomes_api_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                403,
                json={"code": "FORBIDDEN", "detail": "No tenés permisos sobre esta tarea."},
                headers={"content-type": "application/problem+json"},
            )

        session = SessionState()
        session.login(AUTH_BODY)

        with pytest.raises(ApiError) as exc_info:
            _client(handler, session).get_task(9)

        assert exc_info.value.code == "FORBIDDEN"
        assert session.is_authenticated is True

    def test_non_json_error_body(self):
        client = _client(lambda request: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(ApiError) as exc_info:
            client.list_users()

        assert exc_info.value.status_code == 502
        assert exc_info.value.code is None
