"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/user.py
============================================================
Class: PostgresUserRepository

Responsibilities:
  - Credential Store sobre la tabla `users`.
  - Mapear filas -> `User` validando `UserRole`.
  - Traducir la violación de uq_users_email a DuplicateEmailError.

Collaborators:
  - psycopg_pool.ConnectionPool
  - identity.users.User / UserRole
  - crosscutting.exceptions.DatabaseError / DuplicateEmailError

Notes:
  - Email se compara tal cual (case-sensitive), sin normalizar.
  - Orden estable en listados: id ASC.
============================================================
"""

from __future__ import annotations

from typing import Optional

from psycopg.errors import UniqueViolation
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError, DuplicateEmailError
from ....identity.users import User, UserRole
from ._sql import fetchall, fetchone

_USER_COLUMNS = "id, email, password_hash, role, created_at"


def _row_to_user(row: tuple) -> User:
    try:
        role = UserRole(row[3])
    except ValueError as exc:
        raise DatabaseError(f"Invalid user role in database: {row[3]}") from exc

    return User(
        id=int(row[0]),
        email=row[1],
        password_hash=row[2],
        role=role,
        created_at=row[4],
    )


class PostgresUserRepository:
    """Credential Store (PostgreSQL)."""

    def __init__(self, pool: ConnectionPool | None = None) -> None:
        # None => pool global (infrastructure.db.pool)
        self._pool = pool

    def get_user_by_email(self, email: str) -> Optional[User]:
        row = fetchone(
            self._pool,
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s",
            params=(email,),
            log_msg="PostgresUserRepository: get_user_by_email failed",
        )
        return _row_to_user(row) if row else None

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        row = fetchone(
            self._pool,
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s",
            params=(user_id,),
            log_msg="PostgresUserRepository: get_user_by_id failed",
            log_extra={"user_id": user_id},
        )
        return _row_to_user(row) if row else None

    def list_users(self) -> list[User]:
        rows = fetchall(
            self._pool,
            query=f"SELECT {_USER_COLUMNS} FROM users ORDER BY id ASC",
            log_msg="PostgresUserRepository: list_users failed",
        )
        return [_row_to_user(r) for r in rows]

    def count_users(self) -> int:
        row = fetchone(
            self._pool,
            query="SELECT COUNT(*) FROM users",
            log_msg="PostgresUserRepository: count_users failed",
        )
        return int(row[0]) if row else 0

    def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """
        INSERT ... RETURNING.

        uq_users_email es el backstop de unicidad: si otra transacción ganó
        la carrera, se lanza DuplicateEmailError.
        """
        try:
            row = fetchone(
                self._pool,
                query=f"""
                    INSERT INTO users (email, password_hash, role)
                    VALUES (%s, %s, %s)
                    RETURNING {_USER_COLUMNS}
                """,
                params=(email, password_hash, UserRole(role).value),
                log_msg="PostgresUserRepository: create_user failed",
                log_extra={"role": UserRole(role).value},
            )
        except UniqueViolation as exc:
            raise DuplicateEmailError(
                "Email already registered", original_error=exc
            ) from exc

        if not row:
            raise DatabaseError(
                "PostgresUserRepository: create_user failed (no row returned)"
            )
        return _row_to_user(row)
