"""
===============================================================================
TARJETA CRC — identity/users.py
===============================================================================

Módulo:
    Modelos de Usuario (Credential Store shapes)

Responsabilidades:
    - Definir el enum de roles (User / Admin) usado en tokens y en la policy.
    - Definir el dataclass User que persiste el Credential Store.

Colaboradores:
    - identity/tokens.py: escribe user.id + user.role en el token.
    - domain/task_policy.py: decide acceso por rol + ownership.
    - infrastructure/repositories/*/user.py: mapean filas -> User.

Notas:
    - Solo "shapes" de datos, sin lógica de negocio.
    - Los valores del enum son los que viajan en JSON y en el claim `role`.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    """Roles soportados. Default USER; ADMIN solo por seed / script."""

    USER = "User"
    ADMIN = "Admin"


@dataclass(frozen=True, slots=True)
class User:
    """Registro de usuario (el password_hash nunca sale de la capa de identidad)."""

    id: int
    email: str
    password_hash: str
    role: UserRole = UserRole.USER
    created_at: datetime | None = None
