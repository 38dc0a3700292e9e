"""
===============================================================================
TARJETA CRC — client/session.py
===============================================================================

Módulo:
    Estado de sesión del cliente (explícito, sin globals)

Responsabilidades:
    - Mantener {token, email, role} de la sesión actual.
    - Persistir/restaurar la sesión vía un CredentialStore inyectado.
    - Ante un 401: limpiar credenciales e invocar `on_unauthorized`
      (ej. volver a la pantalla de login).

Colaboradores:
    - client.api_client.TaskManagerClient (lee el token, reporta 401)
    - CredentialStore: InMemoryCredentialStore / JsonFileCredentialStore

Notas:
    - Los nombres de clave (tm_token / tm_user) son los del cliente web.
===============================================================================
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Protocol

TOKEN_KEY = "tm_token"
USER_KEY = "tm_user"

ADMIN_ROLE = "Admin"


@dataclass(frozen=True, slots=True)
class SessionUser:
    email: str
    role: str


class CredentialStore(Protocol):
    """Almacenamiento clave/valor de credenciales."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class InMemoryCredentialStore:
    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileCredentialStore:
    """Persiste las credenciales en un archivo JSON (permisos 0600)."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return {str(k): str(v) for k, v in data.items()} if isinstance(data, dict) else {}

    def _save(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # R: se crea ya con 0600; el chmod cubre archivos previos más abiertos.
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(data, fh)
        os.chmod(self._path, 0o600)

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


class SessionState:
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      SessionState

    Responsabilidades:
      - Exponer token/usuario/rol actuales
      - login(auth): guardar la respuesta {token, email, role}
      - logout(): borrar credenciales
      - handle_unauthorized(): logout + callback

    Colaboradores:
      - CredentialStore
    ----------------------------------------------------------------------------
    """

    def __init__(
        self,
        store: CredentialStore | None = None,
        *,
        on_unauthorized: Callable[[], None] | None = None,
    ) -> None:
        self._store = store or InMemoryCredentialStore()
        self._on_unauthorized = on_unauthorized
        self._token: str | None = self._store.get(TOKEN_KEY)
        self._user: SessionUser | None = self._restore_user()

    def _restore_user(self) -> SessionUser | None:
        raw = self._store.get(USER_KEY)
        if not raw:
            return None
        try:
            data = json.loads(raw)
            return SessionUser(email=str(data["email"]), role=str(data["role"]))
        except (ValueError, KeyError, TypeError):
            return None

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def user(self) -> SessionUser | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    @property
    def is_admin(self) -> bool:
        return self._user is not None and self._user.role == ADMIN_ROLE

    def login(self, auth: Mapping[str, Any]) -> None:
        """Guarda la respuesta de /auth/login o /auth/register."""
        token = str(auth["token"])
        user = SessionUser(email=str(auth["email"]), role=str(auth["role"]))
        self._store.set(TOKEN_KEY, token)
        self._store.set(USER_KEY, json.dumps({"email": user.email, "role": user.role}))
        self._token = token
        self._user = user

    def logout(self) -> None:
        self._store.remove(TOKEN_KEY)
        self._store.remove(USER_KEY)
        self._token = None
        self._user = None

    def handle_unauthorized(self) -> None:
        """401 desde el servidor: la sesión ya no sirve."""
        self.logout()
        if self._on_unauthorized is not None:
            self._on_unauthorized()
