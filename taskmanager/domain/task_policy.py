"""
===============================================================================
TARJETA CRC — domain/task_policy.py
===============================================================================

Módulo:
    Política de Acceso a Tareas (owner / admin)

Responsabilidades:
    - Decidir si un caller puede leer/modificar/borrar una tarea.
    - Filtrar listados según la misma regla.
    - Ser 100% testeable: funciones puras, inputs explícitos, sin I/O.

Colaboradores:
    - identity.users.UserRole
    - application/usecases/tasks: toda operación sobre una tarea existente
      pasa por can_access / can_access_task; los listados por filter_visible.

Regla:
    - role == Admin  OR  caller_id == owner_id
    - Crear no requiere chequeo: el owner siempre es el caller.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from ..identity.users import UserRole
from .entities import Task


@dataclass(frozen=True, slots=True)
class Caller:
    """Identidad verificada del request (viene del token, nunca del body)."""

    user_id: int
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def can_access(caller_id: int, caller_role: UserRole | str, owner_id: int) -> bool:
    """True si el caller es Admin o es el owner del recurso."""
    try:
        role = UserRole(caller_role)
    except ValueError:
        return False
    if role == UserRole.ADMIN:
        return True
    return caller_id == owner_id


def can_access_task(caller: Caller, task: Task) -> bool:
    return can_access(caller.user_id, caller.role, task.user_id)


def filter_visible(tasks: Iterable[Task], caller: Caller) -> List[Task]:
    """Admin ve todo; el resto solo sus tareas. Conserva el orden de entrada."""
    return [task for task in tasks if can_access_task(caller, task)]
