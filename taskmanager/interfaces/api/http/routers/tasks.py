"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/tasks.py
===============================================================================

Class/Module:
    Tasks Router

Responsibilities:
    - Exponer CRUD de /tasks para cualquier caller autenticado.
    - Convertir requests HTTP -> inputs de casos de uso.
    - Traducir TaskError -> RFC7807 (error_mapping).

Collaborators:
    - application.usecases.tasks
    - interfaces.api.http.dependencies.get_caller
    - container (factories DI)

Notas:
    - El owner de una tarea nueva sale SIEMPRE del token (Caller), nunca
      del body.
    - `{task_id:int}`: un id no numérico no matchea la ruta (404).
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from taskmanager.application.usecases import (
    CreateTaskInput,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskInput,
    UpdateTaskUseCase,
)
from taskmanager.container import (
    get_create_task_use_case,
    get_delete_task_use_case,
    get_get_task_use_case,
    get_list_tasks_use_case,
    get_update_task_use_case,
)
from taskmanager.domain.task_policy import Caller

from ..dependencies import get_caller
from ..error_mapping import raise_task_error
from ..schemas.tasks import CreateTaskReq, TaskRes, UpdateTaskReq

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskRes])
def list_tasks(
    caller: Caller = Depends(get_caller),
    use_case: ListTasksUseCase = Depends(get_list_tasks_use_case),
):
    """Admin: todas las tareas. User: solo las propias."""
    result = use_case.execute(caller)
    if result.error:
        raise_task_error(result.error.code, result.error.message)
    return [TaskRes.from_task(t) for t in result.tasks]


@router.get("/{task_id:int}", response_model=TaskRes)
def get_task(
    task_id: int,
    caller: Caller = Depends(get_caller),
    use_case: GetTaskUseCase = Depends(get_get_task_use_case),
):
    result = use_case.execute(caller, task_id)
    if result.error:
        raise_task_error(result.error.code, result.error.message, task_id)
    return TaskRes.from_task(result.task)


@router.post("", response_model=TaskRes, status_code=status.HTTP_201_CREATED)
def create_task(
    req: CreateTaskReq,
    caller: Caller = Depends(get_caller),
    use_case: CreateTaskUseCase = Depends(get_create_task_use_case),
):
    result = use_case.execute(
        caller,
        CreateTaskInput(
            title=req.title, description=req.description, status=req.status
        ),
    )
    if result.error:
        raise_task_error(result.error.code, result.error.message)
    return TaskRes.from_task(result.task)


@router.put("/{task_id:int}", response_model=TaskRes)
def update_task(
    task_id: int,
    req: UpdateTaskReq,
    caller: Caller = Depends(get_caller),
    use_case: UpdateTaskUseCase = Depends(get_update_task_use_case),
):
    """Update parcial: title / description / status opcionales."""
    result = use_case.execute(
        caller,
        task_id,
        UpdateTaskInput(
            title=req.title, description=req.description, status=req.status
        ),
    )
    if result.error:
        raise_task_error(result.error.code, result.error.message, task_id)
    return TaskRes.from_task(result.task)


@router.delete(
    "/{task_id:int}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_task(
    task_id: int,
    caller: Caller = Depends(get_caller),
    use_case: DeleteTaskUseCase = Depends(get_delete_task_use_case),
):
    result = use_case.execute(caller, task_id)
    if result.error:
        raise_task_error(result.error.code, result.error.message, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
