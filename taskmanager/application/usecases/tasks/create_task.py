"""
Name: Create Task Use Case

Responsibilities:
  - Validate title, description and status (default Pending)
  - Always assign the task to the caller; client-supplied owners are ignored

Collaborators:
  - domain.repositories.TaskRepository
  - domain.task_policy.Caller
"""

from dataclasses import dataclass

from ....crosscutting.logger import logger
from ....domain.entities import TaskStatus
from ....domain.repositories import TaskRepository
from ....domain.task_policy import Caller
from .task_fields import (
    DEFAULT_MAX_DESCRIPTION_CHARS,
    DEFAULT_MAX_TITLE_CHARS,
    validate_description,
    validate_status,
    validate_title,
)
from .task_results import TaskResult


@dataclass
class CreateTaskInput:
    title: str
    description: str | None = None
    status: str | None = TaskStatus.PENDING.value


class CreateTaskUseCase:
    """R: Create a task owned by the caller."""

    def __init__(
        self,
        repository: TaskRepository,
        *,
        max_title_chars: int = DEFAULT_MAX_TITLE_CHARS,
        max_description_chars: int = DEFAULT_MAX_DESCRIPTION_CHARS,
    ):
        self.repository = repository
        self.max_title_chars = max_title_chars
        self.max_description_chars = max_description_chars

    def execute(self, caller: Caller, input_data: CreateTaskInput) -> TaskResult:
        title, error = validate_title(input_data.title, self.max_title_chars)
        if error:
            return TaskResult(error=error)

        description, error = validate_description(
            input_data.description, self.max_description_chars
        )
        if error:
            return TaskResult(error=error)

        # R: a missing status means the default, an explicit value must be valid.
        raw_status = (
            TaskStatus.PENDING.value
            if input_data.status is None
            else input_data.status
        )
        status, error = validate_status(raw_status)
        if error:
            return TaskResult(error=error)

        task = self.repository.create_task(
            title=title,
            description=description,
            status=status,
            user_id=caller.user_id,
        )
        logger.info(
            "Tarea creada", extra={"task_id": task.id, "user_id": caller.user_id}
        )
        return TaskResult(task=task)
