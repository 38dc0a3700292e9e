"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/task.py
============================================================
Class: InMemoryTaskRepository

Responsibilities:
  - Almacenar tareas en memoria (tests / local dev).
  - Asignar ids incrementales como lo haría una columna IDENTITY.
  - Ordering determinístico alineado con Postgres: id ASC.

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - Copias defensivas: los callers nunca reciben la instancia almacenada.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional

from ....domain.entities import Task, TaskStatus


class InMemoryTaskRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1

    def create_task(
        self,
        *,
        title: str,
        description: str,
        status: TaskStatus,
        user_id: int,
    ) -> Task:
        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description or "",
                status=TaskStatus(status),
                user_id=user_id,
                created_at=datetime.now(timezone.utc),
            )
            self._tasks[task.id] = task
            self._next_id += 1
            return replace(task)

    def get_task(self, task_id: int) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
            return replace(task) if task else None

    def list_tasks(self, *, owner_id: Optional[int] = None) -> List[Task]:
        with self._lock:
            items = [
                replace(task)
                for task in self._tasks.values()
                if owner_id is None or task.user_id == owner_id
            ]
        return sorted(items, key=lambda t: t.id)

    def update_task(
        self,
        task_id: int,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> Optional[Task]:
        with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                return None
            updated = replace(
                current,
                title=current.title if title is None else title,
                description=current.description if description is None else description,
                status=current.status if status is None else TaskStatus(status),
            )
            self._tasks[task_id] = updated
            return replace(updated)

    def delete_task(self, task_id: int) -> bool:
        with self._lock:
            return self._tasks.pop(task_id, None) is not None
