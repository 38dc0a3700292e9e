"""
===============================================================================
TARJETA CRC — taskmanager/api/exception_handlers.py
===============================================================================

Responsabilidades:
  - Traducir excepciones a respuestas RFC7807.
  - Loguear errores con request_id + error_id.
  - No filtrar detalles internos en producción.

Mapeo:
  - AppHTTPException        -> su status/código
  - RequestValidationError  -> 400 VALIDATION_ERROR
  - DatabaseError           -> 503 DATABASE_ERROR
  - DuplicateEmailError     -> 409 CONFLICT (si escapa de un caso de uso)
  - TaskManagerError        -> 500 INTERNAL_ERROR
  - Exception               -> 500 INTERNAL_ERROR (fallback)

Colaboradores:
  - crosscutting.error_responses
  - crosscutting.exceptions
===============================================================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    problem_response,
    request_validation_exception_handler,
)
from ..crosscutting.exceptions import (
    DatabaseError,
    DuplicateEmailError,
    TaskManagerError,
)
from ..crosscutting.logger import logger


async def _handle_service_error(
    request: Request,
    *,
    exc: TaskManagerError,
    code: ErrorCode,
    status_code: int,
    detail: str,
) -> JSONResponse:
    logger.error(
        "Error de servicio",
        extra={
            "code": code.value,
            "error_id": exc.error_id,
            "error_code": exc.error_code,
        },
    )
    return problem_response(
        request,
        status_code=status_code,
        code=code,
        detail=detail,
        errors=[{"error_id": exc.error_id}],
    )


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    return await _handle_service_error(
        request,
        exc=exc,
        code=ErrorCode.DATABASE_ERROR,
        status_code=503,
        detail="Base de datos no disponible temporalmente.",
    )


async def duplicate_email_handler(
    request: Request, exc: DuplicateEmailError
) -> JSONResponse:
    return problem_response(
        request,
        status_code=409,
        code=ErrorCode.CONFLICT,
        detail="Email is already registered.",
    )


async def task_manager_error_handler(
    request: Request, exc: TaskManagerError
) -> JSONResponse:
    return await _handle_service_error(
        request,
        exc=exc,
        code=ErrorCode.INTERNAL_ERROR,
        status_code=500,
        detail="Error interno.",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler para excepciones no tipadas.

    - Log completo (stacktrace).
    - Respuesta genérica en producción.
    """
    logger.error("Excepción no controlada", exc_info=True, extra={"error": str(exc)})

    detail = "Error interno." if get_settings().is_production() else str(exc)
    return problem_response(
        request,
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=detail,
    )


def register_exception_handlers(app) -> None:
    """
    Registra handlers en la app FastAPI.

    Orden: específicos primero, Exception al final como fallback.
    """
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(DuplicateEmailError, duplicate_email_handler)
    app.add_exception_handler(TaskManagerError, task_manager_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
