"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/__init__.py
===============================================================================

Responsibilities:
    - Re-exportar routers por feature (tasks, users) para el router raíz.
===============================================================================
"""

from .tasks import router as tasks_router
from .users import router as users_router

__all__ = ["tasks_router", "users_router"]
