"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/users.py
===============================================================================

Responsibilities:
    - GET /users: listado de usuarios, solo Admin (403 para el resto).

Collaborators:
    - application.usecases.users.ListUsersUseCase
    - dependencies.get_admin_caller (401 sin token, 403 sin rol)
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from taskmanager.application.usecases import ListUsersUseCase
from taskmanager.container import get_list_users_use_case
from taskmanager.domain.task_policy import Caller

from ..dependencies import get_admin_caller
from ..error_mapping import raise_user_error
from ..schemas.users import UserRes

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserRes])
def list_users(
    caller: Caller = Depends(get_admin_caller),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    result = use_case.execute(caller)
    if result.error:
        raise_user_error(result.error.code, result.error.message)
    return [UserRes.from_user(u) for u in result.users]
