"""
Task use cases (public exports).
"""

from __future__ import annotations

from .create_task import CreateTaskInput, CreateTaskUseCase
from .delete_task import DeleteTaskUseCase
from .get_task import GetTaskUseCase
from .list_tasks import ListTasksUseCase
from .task_results import (
    DeleteTaskResult,
    TaskError,
    TaskErrorCode,
    TaskListResult,
    TaskResult,
)
from .update_task import UpdateTaskInput, UpdateTaskUseCase

__all__ = [
    "CreateTaskInput",
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "GetTaskUseCase",
    "ListTasksUseCase",
    "UpdateTaskInput",
    "UpdateTaskUseCase",
    "DeleteTaskResult",
    "TaskError",
    "TaskErrorCode",
    "TaskListResult",
    "TaskResult",
]
