"""
===============================================================================
TARJETA CRC — taskmanager/api/versioning.py (Alias de Rutas)
===============================================================================

Responsabilidades:
  - Exponer todas las rutas también bajo /api (base URL del cliente web),
    reutilizando los mismos routers sin duplicar lógica.

Colaboradores:
  - interfaces.api.http.routes.router (tasks + users)
  - api.auth_routes.router (auth)
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, FastAPI

from ..interfaces.api.http.routes import router as business_router
from .auth_routes import router as auth_router

API_PREFIX = "/api"


def include_versioned_routes(app: FastAPI) -> None:
    """Incluye el alias /api/... para auth, tasks y users."""
    api_router = APIRouter(prefix=API_PREFIX)
    api_router.include_router(auth_router)
    api_router.include_router(business_router)
    app.include_router(api_router)


__all__ = ["include_versioned_routes", "API_PREFIX"]
