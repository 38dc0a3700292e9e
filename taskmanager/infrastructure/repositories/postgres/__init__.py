"""Repositorios PostgreSQL (psycopg + psycopg_pool)."""

from .task import PostgresTaskRepository
from .user import PostgresUserRepository

__all__ = ["PostgresTaskRepository", "PostgresUserRepository"]
