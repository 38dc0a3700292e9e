"""
Name: Task field validation

Responsibilities:
  - Validate title / description / status input shared by create and update
  - Return the normalized value or a TaskError, never raise

Collaborators:
  - domain.entities.TaskStatus
  - task_results.task_validation_error
"""

from __future__ import annotations

from ....domain.entities import TaskStatus
from .task_results import TaskError, task_validation_error

DEFAULT_MAX_TITLE_CHARS = 200
DEFAULT_MAX_DESCRIPTION_CHARS = 1000


def validate_title(title: str | None, max_chars: int) -> tuple[str | None, TaskError | None]:
    normalized = (title or "").strip()
    if not normalized:
        return None, task_validation_error("Title is required.")
    if len(normalized) > max_chars:
        return None, task_validation_error(
            f"Title must be at most {max_chars} characters."
        )
    return normalized, None


def validate_description(
    description: str | None, max_chars: int
) -> tuple[str, TaskError | None]:
    value = description or ""
    if len(value) > max_chars:
        return "", task_validation_error(
            f"Description must be at most {max_chars} characters."
        )
    return value, None


def validate_status(status: str | None) -> tuple[TaskStatus | None, TaskError | None]:
    parsed = TaskStatus.parse(status)
    if parsed is None:
        return None, task_validation_error(
            f"Invalid status '{status}'. Valid values: {TaskStatus.valid_values()}."
        )
    return parsed, None
