"""
Use Cases Layer (Business Operations)

Structure
---------
usecases/
├── auth/    # Register / login
├── tasks/   # Task CRUD gated by the owner/admin policy
└── users/   # Admin user listing

Usage
-----
    from taskmanager.application.usecases import CreateTaskUseCase, LoginUserUseCase
"""

# Auth
from .auth import (
    AuthError,
    AuthErrorCode,
    AuthResult,
    LoginUserInput,
    LoginUserUseCase,
    RegisterUserInput,
    RegisterUserUseCase,
)

# Tasks
from .tasks import (
    CreateTaskInput,
    CreateTaskUseCase,
    DeleteTaskResult,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    TaskError,
    TaskErrorCode,
    TaskListResult,
    TaskResult,
    UpdateTaskInput,
    UpdateTaskUseCase,
)

# Users
from .users import ListUsersUseCase, UserError, UserErrorCode, UserListResult

__all__ = [
    "AuthError",
    "AuthErrorCode",
    "AuthResult",
    "LoginUserInput",
    "LoginUserUseCase",
    "RegisterUserInput",
    "RegisterUserUseCase",
    "CreateTaskInput",
    "CreateTaskUseCase",
    "DeleteTaskResult",
    "DeleteTaskUseCase",
    "GetTaskUseCase",
    "ListTasksUseCase",
    "TaskError",
    "TaskErrorCode",
    "TaskListResult",
    "TaskResult",
    "UpdateTaskInput",
    "UpdateTaskUseCase",
    "ListUsersUseCase",
    "UserError",
    "UserErrorCode",
    "UserListResult",
]
