"""
===============================================================================
USE CASE: Register User
===============================================================================

Business Goal:
    Crear una cuenta y devolver un token para login inmediato.

Reglas:
    - El rol es SIEMPRE User (no hay escalada de privilegios en el registro).
    - El password se hashea antes de persistir.
    - Email único, comparación exacta (case-sensitive).
    - El chequeo previo puede perder una carrera; la constraint del storage
      (DuplicateEmailError) es el backstop y produce el mismo CONFLICT.

Colaboradores:
    - UserRepository (Credential Store)
    - identity.passwords.PasswordHasher
    - identity.tokens.TokenService
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from ....crosscutting.exceptions import DuplicateEmailError
from ....crosscutting.logger import logger
from ....domain.repositories import UserRepository
from ....identity.passwords import PasswordHasher
from ....identity.tokens import TokenService
from ....identity.users import UserRole
from .auth_results import EMAIL_TAKEN_MESSAGE, AuthError, AuthErrorCode, AuthResult

DEFAULT_MIN_PASSWORD_CHARS = 6


@dataclass
class RegisterUserInput:
    email: str
    password: str


def is_valid_email(email: str) -> bool:
    """Chequeo mínimo de formato: local@dominio, sin espacios."""
    if not email or any(ch.isspace() for ch in email):
        return False
    local, sep, domain = email.rpartition("@")
    return bool(sep) and bool(local) and bool(domain)


class RegisterUserUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
        *,
        min_password_chars: int = DEFAULT_MIN_PASSWORD_CHARS,
    ) -> None:
        self._users = user_repository
        self._hasher = password_hasher
        self._tokens = token_service
        self._min_password_chars = min_password_chars

    def execute(self, input_data: RegisterUserInput) -> AuthResult:
        email = (input_data.email or "").strip()
        password = input_data.password or ""

        if not is_valid_email(email):
            return self._error(AuthErrorCode.VALIDATION_ERROR, "A valid email is required.")
        if len(password) < self._min_password_chars:
            return self._error(
                AuthErrorCode.VALIDATION_ERROR,
                f"Password must be at least {self._min_password_chars} characters.",
            )

        if self._users.get_user_by_email(email) is not None:
            return self._error(AuthErrorCode.CONFLICT, EMAIL_TAKEN_MESSAGE)

        try:
            user = self._users.create_user(
                email=email,
                password_hash=self._hasher.hash(password),
                role=UserRole.USER,
            )
        except DuplicateEmailError:
            logger.info("Registro concurrente con email duplicado")
            return self._error(AuthErrorCode.CONFLICT, EMAIL_TAKEN_MESSAGE)

        logger.info("Usuario registrado", extra={"user_id": user.id})
        return AuthResult(token=self._tokens.issue(user), user=user)

    @staticmethod
    def _error(code: AuthErrorCode, message: str) -> AuthResult:
        return AuthResult(error=AuthError(code=code, message=message))
