"""
===============================================================================
CRC CARD — infrastructure/db/pool.py
===============================================================================

Componente:
  Pool de conexiones PostgreSQL (singleton por proceso)

Responsabilidades:
  - Inicializar, exponer y cerrar el pool.
  - Configurar cada conexión con statement_timeout.
  - Ping liviano para /healthz.

Colaboradores:
  - psycopg_pool.ConnectionPool
  - api/main.py (lifespan: init_pool / close_pool)

Principios:
  - Fail-fast: doble init o uso sin init lanzan errores tipados.
===============================================================================
"""

from __future__ import annotations

import threading
from typing import Optional

from psycopg_pool import ConnectionPool

from ...crosscutting.logger import logger
from .errors import PoolAlreadyInitializedError, PoolNotInitializedError

_pool: Optional[ConnectionPool] = None
_pool_lock = threading.Lock()


def _make_configure(statement_timeout_ms: int):
    def _configure_connection(conn) -> None:
        # Guardrail contra queries colgadas.
        if statement_timeout_ms > 0:
            conn.execute(f"SET statement_timeout = {int(statement_timeout_ms)}")
            conn.commit()

    return _configure_connection


def init_pool(
    database_url: str,
    min_size: int,
    max_size: int,
    *,
    statement_timeout_ms: int = 0,
) -> ConnectionPool:
    """Inicializa el pool (una vez por proceso)."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            raise PoolAlreadyInitializedError("El pool ya fue inicializado.")

        logger.info(
            "Inicializando pool DB",
            extra={"min_size": min_size, "max_size": max_size},
        )
        _pool = ConnectionPool(
            conninfo=database_url,
            min_size=min_size,
            max_size=max_size,
            configure=_make_configure(statement_timeout_ms),
            open=True,
        )
        return _pool


def get_pool() -> ConnectionPool:
    if _pool is None:
        raise PoolNotInitializedError(
            "Pool no inicializado. Llamar init_pool() primero."
        )
    return _pool


def ping() -> bool:
    """SELECT 1 contra el pool; False si falla o no está inicializado."""
    try:
        with get_pool().connection() as conn:
            conn.execute("SELECT 1").fetchone()
        return True
    except Exception as exc:
        logger.warning("DB ping falló", extra={"error": str(exc)})
        return False


def close_pool() -> None:
    """Cierra el pool (idempotente)."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            logger.info("Cerrando pool DB")
            try:
                _pool.close()
            finally:
                _pool = None
