"""
============================================================
TARJETA CRC — client/api_client.py
============================================================
Class: TaskManagerClient

Responsibilities:
  - Cliente HTTP (httpx) para la API de tareas.
  - Adjuntar `Authorization: Bearer <token>` desde SessionState.
  - Ante 401: SessionState.handle_unauthorized() y luego ApiError.
  - Traducir respuestas no-2xx (problem+json) a ApiError(status, code, detail).

Collaborators:
  - httpx.Client
  - client.session.SessionState
============================================================
"""

from __future__ import annotations

from typing import Any

import httpx

from .session import SessionState

DEFAULT_BASE_URL = "http://localhost:8000/api"


class ApiError(Exception):
    """Respuesta no exitosa de la API."""

    def __init__(self, status_code: int, code: str | None, detail: str):
        super().__init__(f"{status_code} {code or ''}: {detail}".strip())
        self.status_code = status_code
        self.code = code
        self.detail = detail


class TaskManagerClient:
    def __init__(
        self,
        session: SessionState | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.session = session or SessionState()
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout_s,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def __enter__(self) -> "TaskManagerClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        if self.session.token:
            return {"Authorization": f"Bearer {self.session.token}"}
        return {}

    def _request(self, method: str, path: str, *, json: Any = None) -> httpx.Response:
        response = self._client.request(method, path, json=json, headers=self._headers())

        if response.status_code == 401:
            self.session.handle_unauthorized()

        if response.is_success:
            return response

        code, detail = self._parse_error(response)
        raise ApiError(response.status_code, code, detail)

    @staticmethod
    def _parse_error(response: httpx.Response) -> tuple[str | None, str]:
        try:
            body = response.json()
        except ValueError:
            return None, response.text or response.reason_phrase
        if isinstance(body, dict):
            detail = body.get("detail") or body.get("error") or response.reason_phrase
            return body.get("code"), str(detail)
        return None, response.reason_phrase

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    def register(self, email: str, password: str) -> dict[str, Any]:
        data = self._request(
            "POST", "/auth/register", json={"email": email, "password": password}
        ).json()
        self.session.login(data)
        return data

    def login(self, email: str, password: str) -> dict[str, Any]:
        data = self._request(
            "POST", "/auth/login", json={"email": email, "password": password}
        ).json()
        self.session.login(data)
        return data

    def logout(self) -> None:
        self.session.logout()

    def me(self) -> dict[str, Any]:
        return self._request("GET", "/auth/me").json()

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def list_tasks(self) -> list[dict[str, Any]]:
        return self._request("GET", "/tasks").json()

    def get_task(self, task_id: int) -> dict[str, Any]:
        return self._request("GET", f"/tasks/{task_id}").json()

    def create_task(
        self,
        title: str,
        *,
        description: str | None = None,
        status: str | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"title": title}
        if description is not None:
            payload["description"] = description
        if status is not None:
            payload["status"] = status
        return self._request("POST", "/tasks", json=payload).json()

    def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        description: str | None = None,
        status: str | None = None,
    ) -> dict[str, Any]:
        payload = {
            key: value
            for key, value in (
                ("title", title),
                ("description", description),
                ("status", status),
            )
            if value is not None
        }
        return self._request("PUT", f"/tasks/{task_id}", json=payload).json()

    def delete_task(self, task_id: int) -> None:
        self._request("DELETE", f"/tasks/{task_id}")

    # ------------------------------------------------------------------
    # Users (Admin)
    # ------------------------------------------------------------------

    def list_users(self) -> list[dict[str, Any]]:
        return self._request("GET", "/users").json()
