"""
User use cases (public exports).
"""

from .list_users import ListUsersUseCase, UserError, UserErrorCode, UserListResult

__all__ = ["ListUsersUseCase", "UserError", "UserErrorCode", "UserListResult"]
