"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/task.py
============================================================
Class: PostgresTaskRepository

Responsibilities:
  - CRUD de la tabla `tasks` con SQL parametrizado.
  - Mapear filas -> `Task` validando `TaskStatus`.

Collaborators:
  - psycopg_pool.ConnectionPool
  - domain.entities.Task / TaskStatus
  - crosscutting.exceptions.DatabaseError

Notes:
  - Repositorio puro: la policy owner/admin la aplica el use case.
  - user_id no se actualiza nunca (no hay columna en el SET).
============================================================
"""

from __future__ import annotations

from typing import Optional

from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....domain.entities import Task, TaskStatus
from ._sql import execute, fetchall, fetchone

_TASK_COLUMNS = "id, title, description, status, user_id, created_at"


def _row_to_task(row: tuple) -> Task:
    try:
        status = TaskStatus(row[3])
    except ValueError as exc:
        raise DatabaseError(f"Invalid task status in database: {row[3]}") from exc

    return Task(
        id=int(row[0]),
        title=row[1],
        description=row[2] or "",
        status=status,
        user_id=int(row[4]),
        created_at=row[5],
    )


class PostgresTaskRepository:
    """Task Repository (PostgreSQL)."""

    def __init__(self, pool: ConnectionPool | None = None) -> None:
        self._pool = pool

    def create_task(
        self,
        *,
        title: str,
        description: str,
        status: TaskStatus,
        user_id: int,
    ) -> Task:
        row = fetchone(
            self._pool,
            query=f"""
                INSERT INTO tasks (title, description, status, user_id)
                VALUES (%s, %s, %s, %s)
                RETURNING {_TASK_COLUMNS}
            """,
            params=(title, description, TaskStatus(status).value, user_id),
            log_msg="PostgresTaskRepository: create_task failed",
            log_extra={"user_id": user_id},
        )
        if not row:
            raise DatabaseError(
                "PostgresTaskRepository: create_task failed (no row returned)"
            )
        return _row_to_task(row)

    def get_task(self, task_id: int) -> Optional[Task]:
        row = fetchone(
            self._pool,
            query=f"SELECT {_TASK_COLUMNS} FROM tasks WHERE id = %s",
            params=(task_id,),
            log_msg="PostgresTaskRepository: get_task failed",
            log_extra={"task_id": task_id},
        )
        return _row_to_task(row) if row else None

    def list_tasks(self, *, owner_id: Optional[int] = None) -> list[Task]:
        if owner_id is None:
            rows = fetchall(
                self._pool,
                query=f"SELECT {_TASK_COLUMNS} FROM tasks ORDER BY id ASC",
                log_msg="PostgresTaskRepository: list_tasks failed",
            )
        else:
            rows = fetchall(
                self._pool,
                query=f"""
                    SELECT {_TASK_COLUMNS}
                    FROM tasks
                    WHERE user_id = %s
                    ORDER BY id ASC
                """,
                params=(owner_id,),
                log_msg="PostgresTaskRepository: list_tasks failed",
                log_extra={"owner_id": owner_id},
            )
        return [_row_to_task(r) for r in rows]

    def update_task(
        self,
        task_id: int,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> Optional[Task]:
        updates: list[str] = []
        params: list[object] = []

        if title is not None:
            updates.append("title = %s")
            params.append(title)
        if description is not None:
            updates.append("description = %s")
            params.append(description)
        if status is not None:
            updates.append("status = %s")
            params.append(TaskStatus(status).value)

        if not updates:
            return self.get_task(task_id)

        params.append(task_id)
        # updates lo arma el código, no el input del usuario.
        row = fetchone(
            self._pool,
            query=f"""
                UPDATE tasks
                SET {", ".join(updates)}
                WHERE id = %s
                RETURNING {_TASK_COLUMNS}
            """,
            params=params,
            log_msg="PostgresTaskRepository: update_task failed",
            log_extra={"task_id": task_id},
        )
        return _row_to_task(row) if row else None

    def delete_task(self, task_id: int) -> bool:
        deleted = execute(
            self._pool,
            query="DELETE FROM tasks WHERE id = %s",
            params=(task_id,),
            log_msg="PostgresTaskRepository: delete_task failed",
            log_extra={"task_id": task_id},
        )
        return deleted > 0
