"""
===============================================================================
TARJETA CRC — taskmanager/api/auth_routes.py (Registro / Login / Me)
===============================================================================

Responsabilidades:
  - POST /auth/register: alta con rol User forzado, 201 + {token, email, role}.
  - POST /auth/login: 200 + {token, email, role}; 401 uniforme si falla.
  - GET /auth/me: identidad del token (sin lookup al store).

Patrones aplicados:
  - Adapter: traduce HTTP <-> casos de uso de auth.
  - Fail-safe: cualquier falla de credenciales => mismo 401.

Colaboradores:
  - application.usecases.auth (RegisterUserUseCase, LoginUserUseCase)
  - identity.auth_users.require_caller
  - interfaces.api.http.error_mapping.raise_auth_error
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from ..application.usecases import (
    LoginUserInput,
    LoginUserUseCase,
    RegisterUserInput,
    RegisterUserUseCase,
)
from ..container import get_login_user_use_case, get_register_user_use_case
from ..crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from ..identity.auth_users import require_caller
from ..identity.tokens import TokenClaims
from ..identity.users import UserRole
from ..interfaces.api.http.error_mapping import raise_auth_error

router = APIRouter(prefix="/auth", tags=["auth"], responses=OPENAPI_ERROR_RESPONSES)


# -----------------------------------------------------------------------------
# Modelos HTTP (DTOs)
# -----------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    # R: campos extra (ej. "role") se descartan: el rol lo decide el servidor.
    model_config = ConfigDict(extra="ignore")

    email: str = Field(..., max_length=320)
    password: str = Field(..., max_length=512)


class LoginRequest(BaseModel):
    email: str = Field(..., max_length=320)
    password: str = Field(..., max_length=512)


class AuthResponse(BaseModel):
    token: str
    email: str
    role: UserRole


class MeResponse(BaseModel):
    id: int
    email: str
    role: UserRole


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
def register(
    req: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
):
    """Registra un usuario (rol User) y devuelve un token de acceso."""
    result = use_case.execute(RegisterUserInput(email=req.email, password=req.password))
    if result.error:
        raise_auth_error(result.error.code, result.error.message)
    return AuthResponse(
        token=result.token, email=result.user.email, role=result.user.role
    )


@router.post("/login", response_model=AuthResponse)
def login(
    req: LoginRequest,
    use_case: LoginUserUseCase = Depends(get_login_user_use_case),
):
    """Valida credenciales y devuelve un token de acceso."""
    result = use_case.execute(LoginUserInput(email=req.email, password=req.password))
    if result.error:
        raise_auth_error(result.error.code, result.error.message)
    return AuthResponse(
        token=result.token, email=result.user.email, role=result.user.role
    )


@router.get("/me", response_model=MeResponse)
def me(claims: TokenClaims = Depends(require_caller())):
    """Identidad del caller según el token (el rol es el emitido en el login)."""
    return MeResponse(id=claims.user_id, email=claims.email, role=claims.role)
