"""Infra DB: pool de conexiones + errores tipados."""

from .errors import DatabasePoolError, PoolAlreadyInitializedError, PoolNotInitializedError
from .pool import close_pool, get_pool, init_pool, ping

__all__ = [
    "init_pool",
    "get_pool",
    "close_pool",
    "ping",
    "DatabasePoolError",
    "PoolAlreadyInitializedError",
    "PoolNotInitializedError",
]
