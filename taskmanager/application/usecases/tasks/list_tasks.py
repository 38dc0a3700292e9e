"""
Name: List Tasks Use Case

Responsibilities:
  - Admin: every task
  - Regular user: only the tasks they own

Collaborators:
  - domain.repositories.TaskRepository
  - domain.task_policy.filter_visible
"""

from ....domain.repositories import TaskRepository
from ....domain.task_policy import Caller, filter_visible
from .task_results import TaskListResult


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def execute(self, caller: Caller) -> TaskListResult:
        # R: narrow the query for non-admins; the policy filter is still applied.
        owner_id = None if caller.is_admin else caller.user_id
        tasks = self.repository.list_tasks(owner_id=owner_id)
        return TaskListResult(tasks=filter_visible(tasks, caller))
