"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/user.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Credential Store en memoria (tests / local dev).
  - Replicar la constraint uq_users_email: email duplicado (comparación
    exacta) => DuplicateEmailError, verificado bajo el mismo lock del insert.

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - User es inmutable (frozen), se devuelve tal cual.
============================================================
"""

from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional

from ....crosscutting.exceptions import DuplicateEmailError
from ....identity.users import User, UserRole


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[int, User] = {}
        self._next_id = 1

    def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        with self._lock:
            if any(u.email == email for u in self._users.values()):
                raise DuplicateEmailError("Email already registered")
            user = User(
                id=self._next_id,
                email=email,
                password_hash=password_hash,
                role=UserRole(role),
                created_at=datetime.now(timezone.utc),
            )
            self._users[user.id] = user
            self._next_id += 1
            return user

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user
        return None

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def list_users(self) -> List[User]:
        with self._lock:
            return sorted(self._users.values(), key=lambda u: u.id)

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)
