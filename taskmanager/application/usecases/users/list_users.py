"""
Name: List Users Use Case

Responsibilities:
  - Return every registered user (Admin only)
  - Non-admin callers get FORBIDDEN even if the HTTP guard is bypassed

Collaborators:
  - domain.repositories.UserRepository
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.repositories import UserRepository
from ....domain.task_policy import Caller
from ....identity.users import User


class UserErrorCode(str, Enum):
    FORBIDDEN = "FORBIDDEN"


@dataclass(frozen=True)
class UserError:
    code: UserErrorCode
    message: str


@dataclass
class UserListResult:
    users: List[User] = field(default_factory=list)
    error: UserError | None = None


class ListUsersUseCase:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def execute(self, caller: Caller) -> UserListResult:
        if not caller.is_admin:
            return UserListResult(
                error=UserError(code=UserErrorCode.FORBIDDEN, message="Access denied.")
            )
        return UserListResult(users=self.repository.list_users())
