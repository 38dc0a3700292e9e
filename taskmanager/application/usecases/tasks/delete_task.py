"""
Name: Delete Task Use Case

Responsibilities:
  - Permanently delete a task (no soft-delete)
  - Existence is checked before ownership

Collaborators:
  - domain.repositories.TaskRepository
  - domain.task_policy.can_access_task
"""

from ....crosscutting.logger import logger
from ....domain.repositories import TaskRepository
from ....domain.task_policy import Caller, can_access_task
from .task_results import DeleteTaskResult, task_forbidden, task_not_found


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def execute(self, caller: Caller, task_id: int) -> DeleteTaskResult:
        task = self.repository.get_task(task_id)
        if task is None:
            return DeleteTaskResult(error=task_not_found())
        if not can_access_task(caller, task):
            return DeleteTaskResult(error=task_forbidden())

        if not self.repository.delete_task(task_id):
            return DeleteTaskResult(error=task_not_found())

        logger.info(
            "Tarea eliminada", extra={"task_id": task_id, "user_id": caller.user_id}
        )
        return DeleteTaskResult(deleted=True)
