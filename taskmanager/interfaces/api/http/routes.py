"""
===============================================================================
TARJETA CRC — routes.py (Router raíz / Composición)
===============================================================================

Responsabilidades:
  - Definir el APIRouter de negocio (tasks + users).
  - Centralizar responses RFC7807 para OpenAPI.

Colaboradores:
  - crosscutting.error_responses.OPENAPI_ERROR_RESPONSES
  - routers.tasks / routers.users

Notas:
  - Se incluye desde api/main.py sin prefijo y bajo /api (versioning.py).
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from taskmanager.crosscutting.error_responses import OPENAPI_ERROR_RESPONSES

from .routers import tasks_router, users_router


def build_router() -> APIRouter:
    """Construye el router de negocio (factory, sin side-effects al importar)."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)
    api_router.include_router(tasks_router)
    api_router.include_router(users_router)
    return api_router


router = build_router()

__all__ = ["router", "build_router"]
