"""Repositorios in-memory (tests / desarrollo local sin Postgres)."""

from .task import InMemoryTaskRepository
from .user import InMemoryUserRepository

__all__ = ["InMemoryTaskRepository", "InMemoryUserRepository"]
