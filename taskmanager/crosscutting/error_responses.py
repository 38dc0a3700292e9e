"""
===============================================================================
TARJETA CRC — crosscutting/error_responses.py (Problem Details, RFC 7807)
===============================================================================

Responsabilidades:
  - Catálogo de códigos estables (ErrorCode) para que el cliente reaccione
    por "code" y no por el texto (UNAUTHORIZED => limpiar sesión).
  - Payload problem+json (ErrorDetail) con request_id para correlación.
  - Factories de errores frecuentes + handlers FastAPI.

Colaboradores:
  - crosscutting/middleware.py (request_id en request.state)
  - api/exception_handlers.py (errores no previstos)
  - interfaces/api/http/error_mapping.py (errores de casos de uso)

Restricciones:
  - 401 (quién sos) y 403 (qué podés hacer) nunca se mezclan.
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class ErrorDetail(BaseModel):
    """Problem Details + `code` estable y `errors` opcionales por campo."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str
    code: ErrorCode
    instance: str | None = None
    errors: list[dict[str, Any]] | None = None


# Documentación OpenAPI compartida por los routers.
OPENAPI_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    key: {
        "description": f"{label} (RFC7807)",
        "model": ErrorDetail,
        "content": {
            PROBLEM_JSON_MEDIA_TYPE: {
                "schema": {"$ref": "#/components/schemas/ErrorDetail"}
            }
        },
    }
    for key, label in (
        ("400", "Bad Request"),
        ("401", "Unauthorized"),
        ("403", "Forbidden"),
        ("404", "Not Found"),
        ("409", "Conflict"),
        ("default", "Error"),
    )
}


class AppHTTPException(HTTPException):
    """HTTPException con ErrorCode estable y detalles opcionales."""

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.code = code
        self.errors = errors


def validation_error(
    detail: str, errors: list[dict[str, Any]] | None = None
) -> AppHTTPException:
    return AppHTTPException(400, ErrorCode.VALIDATION_ERROR, detail, errors)


def not_found(resource: str, identifier: str) -> AppHTTPException:
    return AppHTTPException(
        404, ErrorCode.NOT_FOUND, f"{resource} '{identifier}' no encontrado"
    )


def conflict(detail: str) -> AppHTTPException:
    return AppHTTPException(409, ErrorCode.CONFLICT, detail)


def unauthorized(detail: str = "Autenticación requerida") -> AppHTTPException:
    # WWW-Authenticate le indica al cliente que reintente con un Bearer token.
    return AppHTTPException(
        401, ErrorCode.UNAUTHORIZED, detail, headers={"WWW-Authenticate": "Bearer"}
    )


def forbidden(detail: str = "Acceso denegado") -> AppHTTPException:
    return AppHTTPException(403, ErrorCode.FORBIDDEN, detail)


def internal_error(detail: str = "Ocurrió un error inesperado") -> AppHTTPException:
    return AppHTTPException(500, ErrorCode.INTERNAL_ERROR, detail)


def problem_response(
    request: Request,
    *,
    status_code: int,
    code: ErrorCode,
    detail: str,
    errors: list[dict[str, Any]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Arma la respuesta problem+json; agrega el request_id si existe."""
    extra = list(errors or [])
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        extra.append({"request_id": request_id})

    body = ErrorDetail(
        type=f"about:blank/{code.value.lower()}",
        title=code.value.replace("_", " ").title(),
        status=status_code,
        detail=detail,
        code=code,
        instance=str(request.url),
        errors=extra or None,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=headers,
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )


async def app_exception_handler(
    request: Request, exc: AppHTTPException
) -> JSONResponse:
    return problem_response(
        request,
        status_code=exc.status_code,
        code=exc.code,
        detail=str(exc.detail),
        errors=exc.errors,
        headers=exc.headers,
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Body/params inválidos => 400. Nunca se devuelve el input (passwords)."""
    fields = [
        {
            "field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"),
            "msg": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return problem_response(
        request,
        status_code=400,
        code=ErrorCode.VALIDATION_ERROR,
        detail="Request inválido.",
        errors=fields,
    )
