"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio

Responsabilidades:
    - Centralizar exports para imports limpios en application/interfaces.

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .entities import Task, TaskStatus
from .repositories import TaskRepository, UserRepository
from .task_policy import Caller, can_access, can_access_task, filter_visible

__all__ = [
    "Task",
    "TaskStatus",
    "TaskRepository",
    "UserRepository",
    "Caller",
    "can_access",
    "can_access_task",
    "filter_visible",
]
