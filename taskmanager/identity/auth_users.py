"""
===============================================================================
TARJETA CRC — identity/auth_users.py
===============================================================================

Módulo:
    Autenticación de requests (Bearer JWT -> TokenClaims)

Responsabilidades:
    - Extraer el token desde `Authorization: Bearer <token>`.
    - Verificar el token con el TokenService del container.
    - Exponer dependencias FastAPI (require_caller, require_role).

Colaboradores:
    - identity.tokens: TokenService / TokenClaims / TokenVerificationError.
    - crosscutting.error_responses: unauthorized/forbidden estándar.
    - container.get_token_service: instancia configurada.

Decisiones de diseño:
    - Toda falla de autenticación (sin header, esquema incorrecto, firma,
      expiración, claims) produce el MISMO 401: sin oráculo de causa.
    - No hay lookup al store por request: el rol del token es la fuente de
      verdad hasta que expira.
    - No loguear tokens; solo la causa en debug.
===============================================================================
"""

from __future__ import annotations

from typing import Callable

from fastapi import Header, Request

from ..container import get_token_service
from ..crosscutting.error_responses import forbidden, unauthorized
from ..crosscutting.logger import logger
from .tokens import TokenClaims, TokenVerificationError
from .users import UserRole

# R: mismo mensaje para cualquier causa de 401.
UNAUTHORIZED_DETAIL = "Token ausente, inválido o expirado."


def _extract_bearer_token(authorization: str | None) -> str | None:
    """Extrae token desde `Authorization: Bearer <token>`."""
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    token = parts[1].strip()
    return token or None


def authenticate_header(authorization: str | None) -> TokenClaims:
    """Valida el header Authorization y devuelve los claims (o 401 uniforme)."""
    token = _extract_bearer_token(authorization)
    if not token:
        raise unauthorized(UNAUTHORIZED_DETAIL)

    try:
        return get_token_service().verify(token)
    except TokenVerificationError as exc:
        logger.debug("Auth falló: token rechazado", extra={"reason": str(exc)})
        raise unauthorized(UNAUTHORIZED_DETAIL) from exc


def require_caller() -> Callable:
    """Dependency FastAPI: requiere un token válido."""

    async def dependency(
        request: Request,
        authorization: str | None = Header(None, alias="Authorization"),
    ) -> TokenClaims:
        claims = authenticate_header(authorization)
        request.state.caller = claims
        return claims

    return dependency


def require_role(role: UserRole | str) -> Callable:
    """Dependency FastAPI: requiere token válido con un rol específico."""
    required_role = UserRole(role)

    async def dependency(
        request: Request,
        authorization: str | None = Header(None, alias="Authorization"),
    ) -> TokenClaims:
        claims = await require_caller()(request, authorization)
        if claims.role != required_role:
            raise forbidden("Rol insuficiente.")
        return claims

    return dependency
