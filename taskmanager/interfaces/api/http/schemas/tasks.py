"""
===============================================================================
TARJETA CRC — schemas/tasks.py
===============================================================================

Módulo:
    Schemas HTTP para Tareas

Responsabilidades:
    - DTOs de request/response de /tasks.
    - Respuesta con el shape público: {id, title, description, status, userId}.

Notas:
    - Campos extra del body se ignoran: un `userId` enviado por el cliente
      nunca llega al caso de uso.
    - Largo de title/description y valores de status los valida el caso de
      uso (mismo 400 para create y update, límites desde settings).
    - En create, `status` omitido vale Pending; un `null` explícito es 400.
===============================================================================
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from taskmanager.domain.entities import Task, TaskStatus


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class CreateTaskReq(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., description="Título (requerido)")
    description: str | None = Field(default=None, description="Descripción")
    status: str = Field(
        default=TaskStatus.PENDING.value,
        description="Pending | InProgress | Completed (case-insensitive)",
    )


class UpdateTaskReq(BaseModel):
    """Update parcial: solo se modifican los campos enviados."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    status: str | None = None


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class TaskRes(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str
    status: TaskStatus
    user_id: int = Field(..., alias="userId")

    @classmethod
    def from_task(cls, task: Task) -> "TaskRes":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description or "",
            status=task.status,
            user_id=task.user_id,
        )
