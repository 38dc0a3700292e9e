"""
===============================================================================
TARJETA CRC — error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir códigos de error de casos de uso a AppHTTPException.
  - Centralizar el mapeo para que todos los routers respondan igual.

Mapeo:
  - VALIDATION_ERROR -> 400
  - CONFLICT         -> 409
  - UNAUTHORIZED     -> 401 (mensaje uniforme)
  - FORBIDDEN        -> 403
  - NOT_FOUND        -> 404

Colaboradores:
  - application.usecases (AuthErrorCode, TaskErrorCode, UserErrorCode)
  - crosscutting.error_responses
===============================================================================
"""

from __future__ import annotations

from taskmanager.application.usecases import (
    AuthErrorCode,
    TaskErrorCode,
    UserErrorCode,
)
from taskmanager.crosscutting.error_responses import (
    conflict,
    forbidden,
    internal_error,
    not_found,
    unauthorized,
    validation_error,
)


def raise_task_error(
    error_code: TaskErrorCode, message: str, task_id: int | None = None
) -> None:
    """Traduce TaskErrorCode -> HTTP."""
    if error_code == TaskErrorCode.NOT_FOUND:
        raise not_found("Task", str(task_id if task_id is not None else "unknown"))
    if error_code == TaskErrorCode.FORBIDDEN:
        raise forbidden("No tenés permisos sobre esta tarea.")
    if error_code == TaskErrorCode.VALIDATION_ERROR:
        raise validation_error(message)
    raise internal_error(message)


def raise_auth_error(error_code: AuthErrorCode, message: str) -> None:
    """Traduce AuthErrorCode -> HTTP."""
    if error_code == AuthErrorCode.UNAUTHORIZED:
        raise unauthorized(message)
    if error_code == AuthErrorCode.CONFLICT:
        raise conflict(message)
    if error_code == AuthErrorCode.VALIDATION_ERROR:
        raise validation_error(message)
    raise internal_error(message)


def raise_user_error(error_code: UserErrorCode, message: str) -> None:
    if error_code == UserErrorCode.FORBIDDEN:
        raise forbidden(message)
    raise internal_error(message)
