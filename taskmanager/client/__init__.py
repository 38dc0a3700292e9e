"""Cliente Python de la API (httpx) + estado de sesión."""

from .api_client import ApiError, TaskManagerClient
from .session import (
    CredentialStore,
    InMemoryCredentialStore,
    JsonFileCredentialStore,
    SessionState,
    SessionUser,
)

__all__ = [
    "ApiError",
    "TaskManagerClient",
    "CredentialStore",
    "InMemoryCredentialStore",
    "JsonFileCredentialStore",
    "SessionState",
    "SessionUser",
]
