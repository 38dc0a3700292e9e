"""
Auth use cases (public exports).
"""

from __future__ import annotations

from .auth_results import AuthError, AuthErrorCode, AuthResult
from .login_user import LoginUserInput, LoginUserUseCase
from .register_user import RegisterUserInput, RegisterUserUseCase

__all__ = [
    "AuthError",
    "AuthErrorCode",
    "AuthResult",
    "LoginUserInput",
    "LoginUserUseCase",
    "RegisterUserInput",
    "RegisterUserUseCase",
]
