"""
===============================================================================
CRC CARD — infrastructure/db/errors.py
===============================================================================

Componente:
  Errores tipados del Pool

Responsabilidades:
  - Distinguir "pool no inicializado" de "pool inicializado dos veces".
===============================================================================
"""


class DatabasePoolError(Exception):
    """Base de errores del pool."""


class PoolAlreadyInitializedError(DatabasePoolError):
    """init_pool() se llamó más de una vez en el proceso."""


class PoolNotInitializedError(DatabasePoolError):
    """Se pidió el pool antes de init_pool()."""
