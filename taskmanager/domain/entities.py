"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (Task, TaskStatus)

Responsabilidades:
    - Definir la tarea y su catálogo cerrado de estados.
    - Parsear estados desde input externo (case-insensitive) sin aplicar nada.

Colaboradores:
    - domain.repositories: persisten/recuperan estas entidades.
    - domain.task_policy: decide acceso usando Task.user_id.
    - application/usecases/tasks: construyen/consumen estas entidades.

Principios:
    - Sin dependencias a DB/FastAPI.
    - El owner (user_id) se fija al crear y nunca se reasigna.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TaskStatus(str, Enum):
    """
    Estados de una tarea.

    No hay transiciones prohibidas ni estado terminal: cualquier valor puede
    pasar a cualquier otro.
    """

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, value: str | None) -> "TaskStatus | None":
        """Devuelve el estado canónico (ignora mayúsculas) o None si no existe."""
        if value is None:
            return None
        normalized = str(value).strip().lower()
        for status in cls:
            if status.value.lower() == normalized:
                return status
        return None

    @classmethod
    def valid_values(cls) -> str:
        return ", ".join(status.value for status in cls)


@dataclass
class Task:
    """Tarea personal de un usuario (owner = user_id)."""

    id: int
    title: str
    user_id: int
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime | None = None
