"""
===============================================================================
USE CASE: Login User
===============================================================================

Business Goal:
    Validar credenciales y emitir un token.

Seguridad:
    - "Email inexistente" y "password incorrecto" devuelven el MISMO error.
    - Con email inexistente igual se verifica contra un hash descartable para
      que el tiempo de respuesta no delate si la cuenta existe.

Colaboradores:
    - UserRepository.get_user_by_email
    - identity.passwords.PasswordHasher.verify
    - identity.tokens.TokenService.issue
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from ....crosscutting.logger import logger
from ....domain.repositories import UserRepository
from ....identity.passwords import PasswordHasher
from ....identity.tokens import TokenService
from .auth_results import (
    INVALID_CREDENTIALS_MESSAGE,
    AuthError,
    AuthErrorCode,
    AuthResult,
)

_DUMMY_PASSWORD = "not-a-real-password"


@dataclass
class LoginUserInput:
    email: str
    password: str


class LoginUserUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._users = user_repository
        self._hasher = password_hasher
        self._tokens = token_service
        self._dummy_hash: str | None = None

    def execute(self, input_data: LoginUserInput) -> AuthResult:
        email = (input_data.email or "").strip()
        password = input_data.password or ""

        user = self._users.get_user_by_email(email) if email else None
        if user is None:
            self._hasher.verify(password, self._get_dummy_hash())
            logger.info("Login rechazado")
            return self._invalid_credentials()

        if not self._hasher.verify(password, user.password_hash):
            logger.info("Login rechazado")
            return self._invalid_credentials()

        logger.info("Login exitoso", extra={"user_id": user.id})
        return AuthResult(token=self._tokens.issue(user), user=user)

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._hasher.hash(_DUMMY_PASSWORD)
        return self._dummy_hash

    @staticmethod
    def _invalid_credentials() -> AuthResult:
        return AuthResult(
            error=AuthError(
                code=AuthErrorCode.UNAUTHORIZED,
                message=INVALID_CREDENTIALS_MESSAGE,
            )
        )
