"""
===============================================================================
AUTH USE CASE RESULTS
===============================================================================

Responsibilities:
    - AuthErrorCode / AuthError: contrato de error de registro y login.
    - AuthResult: token emitido + usuario (éxito) o error.

Notas:
    - UNAUTHORIZED usa SIEMPRE el mismo mensaje, exista o no el email.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ....identity.users import User


class AuthErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"


INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."
EMAIL_TAKEN_MESSAGE = "Email is already registered."


@dataclass(frozen=True)
class AuthError:
    code: AuthErrorCode
    message: str


@dataclass
class AuthResult:
    """Éxito: token + user. Falla: error."""

    token: str | None = None
    user: User | None = None
    error: AuthError | None = None
