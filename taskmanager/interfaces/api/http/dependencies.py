"""
===============================================================================
TARJETA CRC — dependencies.py (Dependencias comunes de routers)
===============================================================================

Responsabilidades:
  - Convertir TokenClaims (auth) -> Caller (policy), explícito por request.
  - Exponer dependencias FastAPI listas para usar en routers.

Colaboradores:
  - identity.auth_users (require_caller, require_role)
  - domain.task_policy.Caller
===============================================================================
"""

from __future__ import annotations

from fastapi import Depends

from taskmanager.domain.task_policy import Caller
from taskmanager.identity.auth_users import require_caller, require_role
from taskmanager.identity.tokens import TokenClaims
from taskmanager.identity.users import UserRole


def to_caller(claims: TokenClaims) -> Caller:
    """Identidad del token -> actor de la policy."""
    return Caller(user_id=claims.user_id, role=claims.role)


async def get_caller(claims: TokenClaims = Depends(require_caller())) -> Caller:
    return to_caller(claims)


async def get_admin_caller(
    claims: TokenClaims = Depends(require_role(UserRole.ADMIN)),
) -> Caller:
    return to_caller(claims)
