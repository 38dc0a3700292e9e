"""
Helpers de ejecución SQL compartidos por los repositorios Postgres.

- Centralizan logging + DatabaseError.
- Dejan pasar UniqueViolation para que cada repo lo traduzca.
"""

from __future__ import annotations

from typing import Iterable

from psycopg.errors import UniqueViolation
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger


def resolve_pool(pool: ConnectionPool | None) -> ConnectionPool:
    if pool is not None:
        return pool
    from ...db.pool import get_pool

    return get_pool()


def fetchone(
    pool: ConnectionPool | None,
    *,
    query: str,
    params: Iterable[object] = (),
    log_msg: str,
    log_extra: dict[str, object] | None = None,
) -> tuple | None:
    try:
        with resolve_pool(pool).connection() as conn:
            return conn.execute(query, tuple(params)).fetchone()
    except UniqueViolation:
        raise
    except Exception as exc:
        logger.exception(log_msg, extra={**(log_extra or {}), "error": str(exc)})
        raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc


def fetchall(
    pool: ConnectionPool | None,
    *,
    query: str,
    params: Iterable[object] = (),
    log_msg: str,
    log_extra: dict[str, object] | None = None,
) -> list[tuple]:
    try:
        with resolve_pool(pool).connection() as conn:
            return conn.execute(query, tuple(params)).fetchall()
    except Exception as exc:
        logger.exception(log_msg, extra={**(log_extra or {}), "error": str(exc)})
        raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc


def execute(
    pool: ConnectionPool | None,
    *,
    query: str,
    params: Iterable[object] = (),
    log_msg: str,
    log_extra: dict[str, object] | None = None,
) -> int:
    """Ejecuta un comando y devuelve rowcount."""
    try:
        with resolve_pool(pool).connection() as conn:
            return conn.execute(query, tuple(params)).rowcount
    except Exception as exc:
        logger.exception(log_msg, extra={**(log_extra or {}), "error": str(exc)})
        raise DatabaseError(f"{log_msg}: {exc}", original_error=exc) from exc
