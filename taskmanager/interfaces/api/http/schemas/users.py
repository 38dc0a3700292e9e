"""
Schemas HTTP para Usuarios (vista admin).

El password_hash no forma parte del contrato.
"""

from __future__ import annotations

from pydantic import BaseModel

from taskmanager.identity.users import User, UserRole


class UserRes(BaseModel):
    id: int
    email: str
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "UserRes":
        return cls(id=user.id, email=user.email, role=user.role)
