"""
Implementaciones de repositorios (adapters de persistencia).

- postgres/: producción (psycopg + psycopg_pool)
- in_memory/: tests y desarrollo local
"""

from .in_memory import InMemoryTaskRepository, InMemoryUserRepository
from .postgres import PostgresTaskRepository, PostgresUserRepository

__all__ = [
    "InMemoryTaskRepository",
    "InMemoryUserRepository",
    "PostgresTaskRepository",
    "PostgresUserRepository",
]
