"""
===============================================================================
TASK USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Task Use Case Results

Business Goal:
    Proveer modelos compartidos de resultados y errores para los casos de uso
    de tareas, con un contrato estable para validación, autorización y
    recursos inexistentes.

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de lanzar excepciones,
      la API los traduce a status codes fijos (error_mapping).
    - NOT_FOUND y FORBIDDEN son códigos distintos: el primero se evalúa antes.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    task_results models (module)

Responsibilities:
    - TaskErrorCode / TaskError (code + message)
    - TaskResult, TaskListResult, DeleteTaskResult

Collaborators:
    - domain.entities.Task
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import Task


class TaskErrorCode(str, Enum):
    """
    Códigos de error de casos de uso de tareas.

      - VALIDATION_ERROR: título/descr/estado inválidos.
      - FORBIDDEN: la tarea existe pero el caller no es owner ni Admin.
      - NOT_FOUND: la tarea no existe.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class TaskError:
    code: TaskErrorCode
    message: str


@dataclass
class TaskResult:
    """Resultado para casos de uso que retornan una única tarea."""

    task: Task | None = None
    error: TaskError | None = None


@dataclass
class TaskListResult:
    tasks: List[Task] = field(default_factory=list)
    error: TaskError | None = None


@dataclass
class DeleteTaskResult:
    deleted: bool = False
    error: TaskError | None = None


def task_validation_error(message: str) -> TaskError:
    return TaskError(code=TaskErrorCode.VALIDATION_ERROR, message=message)


def task_not_found() -> TaskError:
    return TaskError(code=TaskErrorCode.NOT_FOUND, message="Task not found.")


def task_forbidden() -> TaskError:
    return TaskError(code=TaskErrorCode.FORBIDDEN, message="Access denied.")
