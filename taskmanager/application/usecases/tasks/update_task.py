"""
===============================================================================
USE CASE: Update Task (partial)
===============================================================================

Business Goal:
    Actualizar title, description y/o status de una tarea respetando la
    política owner/admin.

Invariantes:
    - Orden de chequeos: existe -> autorizado -> campos válidos.
    - Todos los campos presentes se validan ANTES de aplicar alguno: un status
      inválido no deja un título a medio actualizar.
    - El owner (user_id) nunca se modifica.

-------------------------------------------------------------------------------
CRC CARD
-------------------------------------------------------------------------------
Class:
    UpdateTaskUseCase

Collaborators:
    - TaskRepository.get_task / update_task
    - task_policy.can_access_task
    - task_fields (validaciones compartidas con create)
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from ....crosscutting.logger import logger
from ....domain.repositories import TaskRepository
from ....domain.task_policy import Caller, can_access_task
from .task_fields import (
    DEFAULT_MAX_DESCRIPTION_CHARS,
    DEFAULT_MAX_TITLE_CHARS,
    validate_description,
    validate_status,
    validate_title,
)
from .task_results import TaskResult, task_forbidden, task_not_found


@dataclass
class UpdateTaskInput:
    """None = campo no enviado (no se modifica)."""

    title: str | None = None
    description: str | None = None
    status: str | None = None


class UpdateTaskUseCase:
    def __init__(
        self,
        repository: TaskRepository,
        *,
        max_title_chars: int = DEFAULT_MAX_TITLE_CHARS,
        max_description_chars: int = DEFAULT_MAX_DESCRIPTION_CHARS,
    ) -> None:
        self._tasks = repository
        self._max_title_chars = max_title_chars
        self._max_description_chars = max_description_chars

    def execute(
        self, caller: Caller, task_id: int, input_data: UpdateTaskInput
    ) -> TaskResult:
        task = self._tasks.get_task(task_id)
        if task is None:
            return TaskResult(error=task_not_found())

        if not can_access_task(caller, task):
            return TaskResult(error=task_forbidden())

        title = description = status = None

        if input_data.title is not None:
            title, error = validate_title(input_data.title, self._max_title_chars)
            if error:
                return TaskResult(error=error)

        if input_data.description is not None:
            description, error = validate_description(
                input_data.description, self._max_description_chars
            )
            if error:
                return TaskResult(error=error)

        if input_data.status is not None:
            status, error = validate_status(input_data.status)
            if error:
                return TaskResult(error=error)

        updated = self._tasks.update_task(
            task_id, title=title, description=description, status=status
        )
        if updated is None:
            # Race: borrada entre lectura y escritura.
            return TaskResult(error=task_not_found())

        logger.info(
            "Tarea actualizada",
            extra={"task_id": task_id, "user_id": caller.user_id},
        )
        return TaskResult(task=updated)
