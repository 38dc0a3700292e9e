"""
===============================================================================
APPLICATION LAYER (Public API / Exports)
===============================================================================

Expone los puntos de entrada estables de la capa de aplicación:
  - ensure_seed_users: cuentas por defecto cuando el store está vacío

Nota:
  - Los casos de uso se importan desde `usecases/`.
===============================================================================
"""

from .seed_users import ensure_seed_users

__all__ = ["ensure_seed_users"]
