"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for tasks and users (ports).
- Keep the application layer independent from PostgreSQL / in-memory storage.

Collaborators
- domain.entities: Task, TaskStatus
- identity.users: User, UserRole
- infrastructure.repositories: postgres and in_memory implementations

Constraints
- Pure interfaces only: no side effects, no SQL.
- Stores assign ids; callers never choose them.
- UserRepository.create_user MUST enforce email uniqueness itself and raise
  crosscutting.exceptions.DuplicateEmailError on a collision.

Notes
- Listing order is ascending id so results are stable between calls.
"""

from typing import List, Optional, Protocol

from ..identity.users import User, UserRole
from .entities import Task, TaskStatus


class TaskRepository(Protocol):
    """Storage for task records. Authorization is applied by the caller."""

    def create_task(
        self,
        *,
        title: str,
        description: str,
        status: TaskStatus,
        user_id: int,
    ) -> Task:
        """Persist a new task and return it with its assigned id."""
        ...

    def get_task(self, task_id: int) -> Optional[Task]:
        ...

    def list_tasks(self, *, owner_id: Optional[int] = None) -> List[Task]:
        """All tasks, or only those owned by owner_id when given."""
        ...

    def update_task(
        self,
        task_id: int,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> Optional[Task]:
        """Apply the given fields; None means unchanged. Returns None if missing."""
        ...

    def delete_task(self, task_id: int) -> bool:
        ...


class UserRepository(Protocol):
    """Credential Store."""

    def create_user(
        self, *, email: str, password_hash: str, role: UserRole = UserRole.USER
    ) -> User:
        ...

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Exact (case-sensitive) email match."""
        ...

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        ...

    def list_users(self) -> List[User]:
        ...

    def count_users(self) -> int:
        ...
