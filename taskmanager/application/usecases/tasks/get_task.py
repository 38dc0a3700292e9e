"""
Name: Get Task Use Case

Responsibilities:
  - Fetch one task, checking existence before ownership

Collaborators:
  - domain.repositories.TaskRepository
  - domain.task_policy.can_access_task
"""

from ....domain.repositories import TaskRepository
from ....domain.task_policy import Caller, can_access_task
from .task_results import TaskResult, task_forbidden, task_not_found


class GetTaskUseCase:
    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def execute(self, caller: Caller, task_id: int) -> TaskResult:
        task = self.repository.get_task(task_id)
        if task is None:
            return TaskResult(error=task_not_found())
        if not can_access_task(caller, task):
            return TaskResult(error=task_forbidden())
        return TaskResult(task=task)
