# taskmanager/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones tipadas del backend (errores internos)
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes, con:
- error_code estable
- error_id para correlación con logs
- message "humana" (sin filtrar secretos)

Los errores esperados del negocio (validación, conflicto, 401/403/404) NO son
excepciones: los casos de uso los devuelven como resultados tipados. Acá viven
solo las fallas de infraestructura y el backstop de unicidad del storage.

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  TaskManagerError + subclases

Responsabilidades:
  - Estandarizar errores internos que luego se mapean a HTTP
  - Generar error_id para rastreo

Colaboradores:
  - api/exception_handlers.py (mapea a AppHTTPException)
  - infrastructure/repositories/* (lanzan DatabaseError / DuplicateEmailError)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class TaskManagerError(Exception):
    """Base para errores internos del sistema (error_code + error_id + message)."""

    error_code: str = "TASK_MANAGER_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(TaskManagerError):
    """Errores de DB (conexión, query, timeout, pool)."""

    error_code: str = "DATABASE_ERROR"


class DuplicateEmailError(TaskManagerError):
    """El storage rechazó un email repetido (constraint uq_users_email)."""

    error_code: str = "DUPLICATE_EMAIL"
